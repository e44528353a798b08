from conference.extensions import db

applications_skills = db.Table(
    "applications_skills",
    db.Column(
        "application_id",
        db.Integer,
        db.ForeignKey("applications.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    db.Column(
        "skill_id",
        db.Integer,
        db.ForeignKey("skills.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)


class Skill(db.Model):
    __tablename__ = "skills"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), unique=True, nullable=False)

    def to_dict(self):
        return {"id": self.id, "name": self.name}


class Application(db.Model):
    __tablename__ = "applications"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(
        db.Integer,
        db.ForeignKey("users.id", ondelete="CASCADE"),
        unique=True,
        nullable=False,
    )
    github = db.Column(db.String(255), nullable=True)
    linkedin = db.Column(db.String(255), nullable=True)
    interests = db.Column(db.Text, nullable=True)
    created_at = db.Column(db.TIMESTAMP(timezone=True), nullable=False, server_default=db.func.now())
    updated_at = db.Column(db.TIMESTAMP(timezone=True), nullable=False, server_default=db.func.now(), onupdate=db.func.now())

    skills = db.relationship("Skill", secondary=applications_skills, backref="applications")

    def to_dict(self):
        return {
            "id": self.id,
            "user_id": self.user_id,
            "github": self.github,
            "linkedin": self.linkedin,
            "interests": self.interests,
            "skills": [skill.to_dict() for skill in self.skills],
        }
