from marshmallow import Schema, fields, post_dump


class AccessDecisionSchema(Schema):
    ok = fields.Boolean()
    access = fields.Boolean()
    date = fields.String()
    is_open = fields.Boolean(data_key='isOpen')
    days_remaining = fields.Integer(data_key='daysRemaining')
    is_admin = fields.Boolean(data_key='isAdmin')
    message = fields.String()

    @post_dump
    def drop_empty(self, data, **kwargs):
        # Optional fields are omitted rather than sent as null.
        return {key: value for key, value in data.items() if value is not None}
