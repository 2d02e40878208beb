from flask import Blueprint
from clicker.api import envelope, request_field
from clicker.services import scores as svc


scores = Blueprint('scores', __name__)


@scores.route('/add', methods=['POST'])
def add_score():
    score = svc.add_score(request_field('user_id'), request_field('score'))
    return envelope(score, 'Score recorded successfully', status=201)


@scores.route('/user/<string:user_id>', methods=['GET'])
def get_user_scores(user_id):
    history = svc.get_user_scores(request_field('user_id'))
    return envelope(history, 'User scores retrieved')


@scores.route('/leaderboard', methods=['GET'])
def get_leaderboard():
    board = svc.get_leaderboard(request_field('limit'))
    return envelope(board, 'Leaderboard retrieved')


@scores.route('/<string:id>', methods=['GET'])
def get_score(id):
    score = svc.get_score(request_field('id'))
    return envelope(score, 'Score retrieved')


@scores.route('/', methods=['PUT'])
def update_score():
    score = svc.update_score(request_field('id'), request_field('score'))
    return envelope(score, 'Score updated')


@scores.route('/<string:id>', methods=['DELETE'])
def delete_score(id):
    deleted = svc.delete_score(request_field('id'))
    return envelope(deleted, 'Score deleted')
