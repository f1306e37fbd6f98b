from flask import Blueprint

blueprint = Blueprint('registrations', __name__)

from . import api
