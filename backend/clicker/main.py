from flask import Blueprint
from clicker.api import envelope

main = Blueprint('main', __name__)

@main.route('/')
def index():
    return envelope(None, 'Welcome to the clicker score server!')
