from conference.extensions import db

teams_users = db.Table(
    "teams_users",
    db.Column(
        "team_id",
        db.Integer,
        db.ForeignKey("teams.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    db.Column(
        "user_id",
        db.Integer,
        db.ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)


class Team(db.Model):
    __tablename__ = "teams"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), nullable=False)
    created_at = db.Column(db.TIMESTAMP(timezone=True), nullable=False, server_default=db.func.now())

    members = db.relationship("User", secondary=teams_users, back_populates="teams")

    def to_dict(self):
        return {"id": self.id, "name": self.name}
