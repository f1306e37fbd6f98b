from flask import Blueprint

blueprint = Blueprint('uploads', __name__)

from . import api
