from datetime import date

from marshmallow import EXCLUDE, Schema, ValidationError, fields, validate, validates

from wtyczka_app.utils.time_utils import age_on

# Letters (Polish diacritics included) and spaces
LETTERS_AND_SPACES = r'^[a-zA-ZąćęłńóśźżĄĆĘŁŃÓŚŹŻ\s]+$'

GENDERS = ('male', 'female', 'other')
FACULTIES = tuple(f'w{number}' for number in range(1, 10))
STUDY_LEVELS = ('bachelor', 'master', 'phd')
STUDY_YEARS = (1, 2, 3, 4)
DIETS = ('standard', 'vegetarian')
TSHIRT_SIZES = ('XS', 'S', 'M', 'L', 'XL', 'XXL')
ABOUT_SOURCES = ('social-media', 'akcja-integracja', 'friend', 'stands', 'other')


class RegistrationSchema(Schema):
    """Registration form: validates input and shapes the API output."""

    class Meta:
        unknown = EXCLUDE

    id = fields.Integer(dump_only=True)
    user_id = fields.String(dump_only=True, data_key='userId')
    email = fields.String(dump_only=True)
    over18 = fields.Boolean(dump_only=True)
    qualified = fields.Boolean(dump_only=True)
    created_at = fields.DateTime(dump_only=True, data_key='createdAt')
    updated_at = fields.DateTime(dump_only=True, data_key='updatedAt')

    name = fields.String(required=True, validate=[
        validate.Length(min=2, max=50, error='Imię musi mieć od 2 do 50 znaków'),
        validate.Regexp(LETTERS_AND_SPACES, error='Imię może zawierać tylko litery i spacje'),
    ])
    surname = fields.String(required=True, validate=[
        validate.Length(min=2, max=50, error='Nazwisko musi mieć od 2 do 50 znaków'),
        validate.Regexp(LETTERS_AND_SPACES, error='Nazwisko może zawierać tylko litery i spacje'),
    ])
    dob = fields.Date(required=True)
    phone_number = fields.String(required=True, data_key='phoneNumber', validate=validate.Regexp(
        r'^[+\s\d]+$', error="Numer telefonu może zawierać tylko cyfry, znak '+' i spacje"))
    pesel = fields.String(required=True, validate=validate.Regexp(
        r'^\d{11}$', error='PESEL musi składać się z 11 cyfr'))
    gender = fields.String(required=True, validate=validate.OneOf(GENDERS, error='Wybierz płeć'))

    faculty = fields.String(required=True, validate=validate.OneOf(FACULTIES, error='Wybierz wydział'))
    student_number = fields.String(required=True, data_key='studentNumber', validate=validate.Length(
        min=1, max=30, error='Numer indeksu musi mieć od 1 do 30 znaków'))
    study_field = fields.String(required=True, data_key='studyField', validate=[
        validate.Length(min=1, max=60, error='Kierunek studiów musi mieć od 1 do 60 znaków'),
        validate.Regexp(LETTERS_AND_SPACES, error='Kierunek studiów może zawierać tylko litery i spacje'),
    ])
    study_level = fields.String(required=True, data_key='studyLevel', validate=validate.OneOf(STUDY_LEVELS))
    study_year = fields.Integer(required=True, data_key='studyYear', validate=validate.OneOf(STUDY_YEARS))

    diet_name = fields.String(required=True, data_key='dietName', validate=validate.OneOf(DIETS))
    tshirt_size = fields.String(required=True, data_key='tshirtSize', validate=validate.OneOf(TSHIRT_SIZES))

    about_wtyczka = fields.String(required=True, data_key='aboutWtyczka', validate=validate.OneOf(ABOUT_SOURCES))
    about_wtyczka_info = fields.String(data_key='aboutWtyczkaInfo', allow_none=True, load_default=None)

    invoice = fields.Boolean(required=True)
    invoice_name = fields.String(data_key='invoiceName', allow_none=True, load_default=None)
    invoice_surname = fields.String(data_key='invoiceSurname', allow_none=True, load_default=None)
    invoice_id = fields.String(data_key='invoiceId', allow_none=True, load_default=None)
    invoice_address = fields.String(data_key='invoiceAddress', allow_none=True, load_default=None)

    reg_accept = fields.Boolean(required=True, data_key='regAccept', validate=validate.Equal(
        True, error='Musisz zaakceptować regulamin'))
    rodo_accept = fields.Boolean(required=True, data_key='rodoAccept', validate=validate.Equal(
        True, error='Musisz wyrazić zgodę na przetwarzanie danych'))

    def __init__(self, *args, event_date: date = None, min_age: int = 18, max_age: int = 70, **kwargs):
        super().__init__(*args, **kwargs)
        self.event_date = event_date
        self.min_age = min_age
        self.max_age = max_age

    @validates('dob')
    def validate_dob(self, value, **kwargs):
        if self.event_date is None:
            return
        age = age_on(value, self.event_date)
        if age < self.min_age:
            raise ValidationError(
                f'Musisz mieć ukończone {self.min_age} lat w dniu wydarzenia '
                f'({self.event_date.strftime("%d.%m.%Y")})'
            )
        if age >= self.max_age:
            raise ValidationError('Podaj poprawne dane')

    @validates('phone_number')
    def validate_phone_digits(self, value, **kwargs):
        if sum(char.isdigit() for char in value) < 9:
            raise ValidationError('Numer telefonu musi zawierać co najmniej 9 cyfr')


class RegistrationUserSchema(Schema):
    """The ``user`` envelope sent alongside the form."""

    class Meta:
        unknown = EXCLUDE

    id = fields.String(required=True, validate=validate.Length(min=1, max=128))
    email = fields.Email(required=True)


class EmailCheckSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    email = fields.String(required=True, validate=validate.Length(min=1))


class ApplicationStatusSchema(Schema):
    ok = fields.Boolean()
    registration = fields.Boolean()
    payment = fields.Boolean()
    qualified = fields.Boolean()
    status = fields.String()
