from enum import Enum


class LabeledEnum(Enum):
    """
    Enum whose members carry a display label and description.  Values are
    auto-numbered in definition order, so ``rank`` is usable for sorting.
    Persisted as the lowercase member name (see LabeledEnumField).
    """

    def __new__(cls, *args, **kwds):
        obj = object.__new__(cls)
        obj._value_ = len(cls.__members__) + 1
        return obj

    def __init__( self, label : str, description : str ):
        self.label = label
        self.description = description
        return

    @classmethod
    def choices(cls):
        return [ ( str(x), x.label ) for x in cls ]

    @classmethod
    def default(cls):
        """ First member unless overridden. """
        return next(iter(cls))

    @classmethod
    def from_name( cls, name : str ):
        wanted = name.strip().lower() if isinstance( name, str ) else ''
        for member in cls:
            if wanted and ( str(member) == wanted ):
                return member
            continue
        raise ValueError( f'Unknown {cls.__name__} name "{name}"' )

    @classmethod
    def coerce( cls, value ):
        """ Accepts a member or its (any case) name; ValueError otherwise. """
        if isinstance( value, cls ):
            return value
        return cls.from_name( value )

    @property
    def rank(self) -> int:
        return self.value

    def __str__(self):
        return self.name.lower()
