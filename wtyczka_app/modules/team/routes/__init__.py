from flask import Blueprint

blueprint = Blueprint('team', __name__)

from . import api
