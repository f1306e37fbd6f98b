from flask import Blueprint

blueprint = Blueprint('admin_auth', __name__)

from . import api
