from flask import current_app
from clicker import db
from clicker.errors import ValidationError, NotFoundError
from clicker.models import User, Score, isoformat
from clicker.services import is_missing, parse_id, parse_score


def _get_user_or_404(user_id) -> User:
    user = db.session.get(User, parse_id(user_id))
    if not user:
        raise NotFoundError('User not found')
    return user


def _get_score_or_404(score_id) -> Score:
    score = db.session.get(Score, parse_id(score_id))
    if not score:
        raise NotFoundError('Score not found')
    return score


def add_score(user_id, value) -> dict:
    if is_missing(user_id) or is_missing(value):
        raise ValidationError('User ID and score are required')
    value = parse_score(value)
    user = _get_user_or_404(user_id)

    score = Score(user_id=user.id, score=value)
    db.session.add(score)
    db.session.commit()
    current_app.logger.info(f"[add_score] score={score.id} user={user.id} value={value}")
    return score.to_dict()


def get_user_scores(user_id) -> list:
    if is_missing(user_id):
        raise ValidationError('User ID is required')
    user = _get_user_or_404(user_id)
    scores = (
        Score.query.filter_by(user_id=user.id)
        .order_by(Score.achieved_at.desc(), Score.id.desc())
        .all()
    )
    return [s.to_dict() for s in scores]


def get_score(score_id) -> dict:
    if is_missing(score_id):
        raise ValidationError('Score ID is required')
    return _get_score_or_404(score_id).to_dict()


def update_score(score_id, value) -> dict:
    if is_missing(score_id) or is_missing(value):
        raise ValidationError('Score ID and value are required')
    value = parse_score(value)
    # Owner is not re-checked here
    score = _get_score_or_404(score_id)
    score.score = value
    db.session.add(score)
    db.session.commit()
    current_app.logger.info(f"[update_score] score={score.id} value={value}")
    return score.to_dict()


def delete_score(score_id) -> dict:
    if is_missing(score_id):
        raise ValidationError('Score ID is required')
    score = _get_score_or_404(score_id)
    payload = score.to_dict()
    db.session.delete(score)
    db.session.commit()
    current_app.logger.info(f"[delete_score] score={payload['id']}")
    return payload


def resolve_limit(limit) -> int:
    """Leaderboard size: configured default for absent/bad values, capped."""
    cfg = current_app.config
    default = int(cfg.get('LEADERBOARD_DEFAULT_LIMIT', 10))
    cap = int(cfg.get('LEADERBOARD_MAX_LIMIT', 100))
    if is_missing(limit) or isinstance(limit, bool):
        return default
    try:
        parsed = int(limit)
    except (TypeError, ValueError):
        return default
    if parsed < 1:
        return default
    return min(parsed, cap)


def get_leaderboard(limit=None) -> list:
    rows = (
        db.session.query(
            Score.id,
            Score.score,
            Score.achieved_at,
            User.id.label('user_id'),
            User.username,
        )
        .join(User, Score.user_id == User.id)
        # Ties: earliest achievement first, then insertion order
        .order_by(Score.score.desc(), Score.achieved_at.asc(), Score.id.asc())
        .limit(resolve_limit(limit))
        .all()
    )
    return [
        {
            'id': r.id,
            'score': r.score,
            'achieved_at': isoformat(r.achieved_at),
            'user_id': r.user_id,
            'username': r.username,
        }
        for r in rows
    ]
