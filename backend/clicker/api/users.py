from flask import Blueprint
from clicker.api import envelope, request_field
from clicker.services import users as svc


users = Blueprint('users', __name__)


@users.route('/register', methods=['POST'])
def register():
    user = svc.register_user(
        request_field('username'),
        request_field('email'),
        request_field('password'),
    )
    return envelope(user, 'User created', status=201)


@users.route('/login', methods=['POST'])
def login():
    user = svc.login_user(request_field('email'), request_field('password'))
    return envelope(user, 'Login successful')


@users.route('/<string:email>', methods=['GET'])
def find_user(email):
    found = svc.find_user_by_email(request_field('email'))
    return envelope(found, 'User found')


@users.route('/', methods=['PUT'])
def update_user():
    user = svc.update_user(
        request_field('id'),
        request_field('username'),
        request_field('email'),
        request_field('password'),
    )
    return envelope(user, 'User updated')


@users.route('/<string:id>', methods=['DELETE'])
def delete_user(id):
    deleted = svc.delete_user(request_field('id'))
    return envelope(deleted, 'User deleted')
