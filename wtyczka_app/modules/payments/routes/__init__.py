from flask import Blueprint

blueprint = Blueprint('payments', __name__)

from . import api
