from flask import current_app
from clicker import db
from clicker.errors import ValidationError, ConflictError, AuthError, NotFoundError
from clicker.models import User
from clicker.services import is_missing, parse_id


def register_user(username, email, password) -> dict:
    if any(is_missing(v) for v in (username, email, password)):
        raise ValidationError('Username, email and password are required')
    username, email = str(username), str(email)

    # Email clash is reported before username clash
    if User.query.filter_by(email=email).first():
        raise ConflictError('Email already used')
    if User.query.filter_by(username=username).first():
        raise ConflictError('Username already taken')

    user = User(username=username, email=email)
    user.set_password(str(password))
    db.session.add(user)
    db.session.commit()
    current_app.logger.info(f"[register] user={user.id} username={user.username}")
    return user.to_dict()


def login_user(email, password) -> dict:
    if is_missing(email) or is_missing(password):
        raise ValidationError('Email and password are required')

    user = User.query.filter_by(email=str(email)).first()
    # Same error for unknown email and wrong password
    if not user or not user.check_password(str(password)):
        current_app.logger.warning("[login] rejected credentials")
        raise AuthError('Invalid email or password')
    current_app.logger.info(f"[login] user={user.id}")
    return user.to_dict()


def find_user_by_email(email) -> list:
    if is_missing(email):
        raise ValidationError('Email is required')
    user = User.query.filter_by(email=str(email)).first()
    if not user:
        raise NotFoundError('User not found')
    return [user.to_dict()]


def update_user(user_id, username, email, password=None) -> dict:
    if any(is_missing(v) for v in (user_id, username, email)):
        raise ValidationError('ID, username and email are required')
    user = db.session.get(User, parse_id(user_id))
    if not user:
        raise NotFoundError('User not found')

    user.username = str(username)
    user.email = str(email)
    # Keep the stored hash unless a new password was supplied
    if not is_missing(password):
        user.set_password(str(password))
    db.session.add(user)
    db.session.commit()
    current_app.logger.info(f"[update_user] user={user.id} password_changed={not is_missing(password)}")
    return user.to_dict()


def delete_user(user_id) -> dict:
    if is_missing(user_id):
        raise ValidationError('ID is required')
    user = db.session.get(User, parse_id(user_id))
    if not user:
        raise NotFoundError('User not found')

    payload = user.to_dict()
    db.session.delete(user)
    db.session.commit()
    current_app.logger.info(f"[delete_user] user={payload['id']}")
    return payload
