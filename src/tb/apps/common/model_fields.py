from django import forms
from django.core.exceptions import ValidationError
from django.db import models

from .enums import LabeledEnum


class LabeledEnumAttribute:
    """
    Instance attribute access always yields the enum member, whatever was
    assigned (member or name).  Class access yields the field.
    """

    def __init__( self, field : 'LabeledEnumField' ):
        self.field = field
        return

    def __get__( self, instance, owner ):
        if instance is None:
            return self.field
        raw_value = instance.__dict__.get( self.field.attname )
        try:
            return self.field.to_python( raw_value )
        except ValidationError:
            # Left for full_clean() to report
            return raw_value

    def __set__( self, instance, value ):
        instance.__dict__[ self.field.attname ] = value
        return


class LabeledEnumField( models.CharField ):
    """
    Persists a LabeledEnum member as its lowercase name.

    Assignment and query lookups take either the member or its name:

        member.role = TripRole.EDITOR
        TripMember.objects.filter( role = 'editor' )

    No choices are put on the column, so a new enum member needs no
    migration.  Unknown names are errors, never silently defaulted: roles
    and statuses decide authorization.
    """

    description = 'LabeledEnum member stored by name'

    def __init__( self, enum_class, *args, **kwargs ):
        if not issubclass( enum_class, LabeledEnum ):
            raise TypeError( f'{enum_class} is not a LabeledEnum' )
        self.enum_class = enum_class

        longest_name = max( len( str( x )) for x in enum_class )
        kwargs.setdefault( 'max_length', max( 32, longest_name + 10 ))
        kwargs.setdefault( 'default', str( enum_class.default() ))
        super().__init__( *args, **kwargs )
        return

    def deconstruct(self):
        name, path, args, kwargs = super().deconstruct()
        kwargs['enum_class'] = self.enum_class
        return name, path, args, kwargs

    def contribute_to_class( self, cls, name, **kwargs ):
        super().contribute_to_class( cls, name, **kwargs )
        setattr( cls, name, LabeledEnumAttribute( self ))
        return

    def from_db_value( self, value, expression, connection ):
        return self.to_python( value )

    def to_python( self, value ):
        if value is None:
            return None
        try:
            return self.enum_class.coerce( value )
        except ValueError:
            raise ValidationError(
                f'"{value}" is not a valid {self.enum_class.__name__}.',
                code = 'invalid',
            )

    def get_prep_value( self, value ):
        member = self.to_python( value )
        return None if member is None else str( member )

    def value_to_string( self, obj ):
        value = self.value_from_object( obj )
        return None if value is None else str( value )

    def validate( self, value, model_instance ):
        member = self.to_python( value )
        if member is None and not self.null:
            raise ValidationError( self.error_messages['null'], code = 'null' )
        return

    def formfield( self, **kwargs ):
        defaults = {
            'form_class': forms.TypedChoiceField,
            'choices': self.enum_class.choices(),
            'coerce': self.to_python,
            'empty_value': None,
        }
        defaults.update( kwargs )
        # Skip CharField.formfield(): it would force a CharField form field
        return models.Field.formfield( self, **defaults )
