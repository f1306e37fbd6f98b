from flask import Blueprint

blueprint = Blueprint('access_gate', __name__)

from . import api
