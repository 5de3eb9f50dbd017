"""
API message helpers for consistent user-facing messages.
"""


class APIMessages:

    @staticmethod
    def is_required( field : str ) -> str:
        return f'{field} is required'

    @staticmethod
    def is_invalid( field : str ) -> str:
        return f'{field} is invalid'

    @staticmethod
    def one_of_required( *fields : str ) -> str:
        return f'One of {", ".join( fields )} is required'

    BAD_REQUEST = 'Bad request'
