from marshmallow import Schema, fields


class TeamMemberSchema(Schema):
    id = fields.Integer()
    name = fields.String()
    role = fields.String(allow_none=True)
    photo_url = fields.String(data_key='photoUrl')
    email = fields.String()
    facebook_url = fields.String(data_key='facebookUrl')
