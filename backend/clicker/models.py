from clicker import db, bcrypt
from datetime import datetime, timezone


def _utcnow():
    # Naive UTC; the columns are TIMESTAMP WITHOUT TIME ZONE
    return datetime.now(timezone.utc).replace(tzinfo=None)


def isoformat(value):
    return value.isoformat() if value else None


class User(db.Model):
    __tablename__ = 'users'
    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(64), unique=True, nullable=False, index=True)
    email = db.Column(db.String(255), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(128), nullable=False)
    created_at = db.Column(db.DateTime, default=_utcnow, nullable=False)
    # Scores go with their owner
    scores = db.relationship('Score', back_populates='user', cascade='all, delete-orphan', lazy='dynamic')

    def set_password(self, password):
        self.password_hash = bcrypt.generate_password_hash(password).decode('utf-8')

    def check_password(self, password):
        return bcrypt.check_password_hash(self.password_hash, password)

    def to_dict(self):
        # Public projection: the hash never leaves the model
        return {
            'id': self.id,
            'username': self.username,
            'email': self.email,
            'created_at': isoformat(self.created_at),
        }


class Score(db.Model):
    __tablename__ = 'scores'
    __table_args__ = (
        db.CheckConstraint('score >= 0', name='ck_scores_score_non_negative'),
    )
    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True)
    score = db.Column(db.Integer, nullable=False)
    achieved_at = db.Column(db.DateTime, default=_utcnow, nullable=False)
    user = db.relationship('User', back_populates='scores')

    def to_dict(self):
        return {
            'id': self.id,
            'user_id': self.user_id,
            'score': self.score,
            'achieved_at': isoformat(self.achieved_at),
        }
