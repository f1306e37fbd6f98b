from marshmallow import EXCLUDE, Schema, fields, validate

STUDENT_STATUSES = ('politechnika', 'other', 'not-student')


class ConfirmationFileSchema(Schema):
    """Metadata returned by ``POST /api/upload-local``."""

    class Meta:
        unknown = EXCLUDE

    url = fields.String(required=True, validate=validate.Length(min=1))
    file_name = fields.String(required=True, data_key='fileName', validate=validate.Length(min=1))
    file_size = fields.Integer(required=True, data_key='fileSize', validate=validate.Range(min=0))
    file_type = fields.String(required=True, data_key='fileType')
    uploaded_at = fields.String(data_key='uploadedAt', load_default=None, allow_none=True)


class PaymentSchema(Schema):
    """Payment form: validates input and shapes the API output."""

    class Meta:
        unknown = EXCLUDE

    id = fields.Integer(dump_only=True)
    user_id = fields.String(dump_only=True, data_key='userId')
    registration_id = fields.Integer(dump_only=True, data_key='registrationId')
    qualified = fields.Boolean(dump_only=True)
    created_at = fields.DateTime(dump_only=True, data_key='createdAt')
    updated_at = fields.DateTime(dump_only=True, data_key='updatedAt')

    student_status = fields.String(required=True, data_key='studentStatus',
                                   validate=validate.OneOf(STUDENT_STATUSES))
    emergency_contact_name = fields.String(required=True, data_key='emergencyContactName', validate=validate.Length(
        min=2, max=120, error='Imię i nazwisko jest wymagane'))
    emergency_contact_phone = fields.String(required=True, data_key='emergencyContactPhone', validate=validate.Length(
        min=9, max=32, error='Numer telefonu jest wymagany'))
    emergency_contact_relation = fields.String(data_key='emergencyContactRelation', load_default=None,
                                               allow_none=True, validate=validate.Length(max=60))

    needs_transport = fields.Boolean(required=True, data_key='needsTransport')
    medical_conditions = fields.String(data_key='medicalConditions', load_default='', allow_none=True)
    medications = fields.String(load_default='', allow_none=True)

    payment_confirmation_file = fields.Nested(ConfirmationFileSchema, data_key='paymentConfirmationFile',
                                              load_default=None, allow_none=True)

    transfer_confirmation = fields.Boolean(required=True, data_key='transferConfirmation', validate=validate.Equal(
        True, error='Musisz potwierdzić wykonanie przelewu'))
    age_confirmation = fields.Boolean(required=True, data_key='ageConfirmation', validate=validate.Equal(
        True, error='Musisz potwierdzić, że masz ukończone 18 lat'))
    cancellation_policy = fields.Boolean(required=True, data_key='cancellationPolicy', validate=validate.Equal(
        True, error='Musisz zaakceptować politykę anulowania'))


class PaymentUserSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    id = fields.String(required=True, validate=validate.Length(min=1, max=128))
