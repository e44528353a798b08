from conference.extensions import db
from .enums import UserRole


class User(db.Model):
    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True)
    role_id = db.Column(db.Integer, nullable=False, default=UserRole.USER.value)
    email = db.Column(db.String(255), unique=True, nullable=False)
    first_name = db.Column(db.String(50), nullable=True)
    last_name = db.Column(db.String(50), nullable=True)
    school = db.Column(db.String(255), nullable=True)
    grad_year = db.Column(db.Integer, nullable=True)
    updated_at = db.Column(db.TIMESTAMP(timezone=True), nullable=False, server_default=db.func.now(), onupdate=db.func.now())
    created_at = db.Column(db.TIMESTAMP(timezone=True), nullable=False, server_default=db.func.now())

    # Dependents go away with the user (force delete)
    tokens = db.relationship("Token", backref="user", cascade="all, delete-orphan")
    application = db.relationship(
        "Application", backref="user", uselist=False, cascade="all, delete-orphan"
    )
    talks = db.relationship("Talk", backref="speaker", cascade="all, delete-orphan")
    check_ins = db.relationship("CheckIn", backref="user", cascade="all, delete-orphan")
    events = db.relationship("Event", secondary="check_ins", viewonly=True)
    teams = db.relationship("Team", secondary="teams_users", back_populates="members")

    @property
    def is_admin(self):
        return self.role_id == UserRole.ADMIN.value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, User):
            return self.id == other.id
        return False

    def __hash__(self):
        return hash(self.id)

    def to_dict(self, include_related=False):
        data = {
            "id": self.id,
            "role_id": self.role_id,
            "email": self.email,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "school": self.school,
            "grad_year": self.grad_year,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }
        if include_related:
            data["application"] = self.application.to_dict() if self.application else None
            data["talks"] = [talk.to_dict() for talk in self.talks]
            data["teams"] = [team.to_dict() for team in self.teams]
            data["events"] = [event.to_dict() for event in self.events]
        return data

    def __repr__(self):
        return (
            f"User("
            f"id={self.id}, "
            f"email='{self.email}', "
            f"first_name='{self.first_name}', "
            f"last_name='{self.last_name}', "
            f"role_id={self.role_id}"
            f")"
        )
