class CollaborationError( Exception ):
    """
    Base for the typed errors raised by the plan collaboration engine.  Each
    kind carries the HTTP status the API layer answers with; the message is
    meant for direct display.
    """
    status_code = 500
    default_message = 'Unexpected error.'

    def __init__( self, message : str = None ):
        self.message = message or self.default_message
        super().__init__( self.message )
        return


class BadRequestError( CollaborationError ):
    status_code = 400
    default_message = 'Bad request.'


class UnauthorizedError( CollaborationError ):
    status_code = 401
    default_message = 'Authentication required.'


class ForbiddenError( CollaborationError ):
    status_code = 403
    default_message = 'You do not have permission to perform this action.'


class NotFoundError( CollaborationError ):
    status_code = 404
    default_message = 'Not found.'


class ConflictError( CollaborationError ):
    status_code = 409
    default_message = 'Conflict.'
