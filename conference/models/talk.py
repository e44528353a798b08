from conference.extensions import db


class Talk(db.Model):
    __tablename__ = "talks"

    id = db.Column(db.Integer, primary_key=True)
    speaker_id = db.Column(
        db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    name = db.Column(db.String(255), nullable=False)
    description = db.Column(db.String(255), nullable=False)
    created_at = db.Column(db.TIMESTAMP(timezone=True), nullable=False, server_default=db.func.now())
    updated_at = db.Column(db.TIMESTAMP(timezone=True), nullable=False, server_default=db.func.now(), onupdate=db.func.now())

    def to_dict(self):
        return {
            "id": self.id,
            "speaker_id": self.speaker_id,
            "name": self.name,
            "description": self.description,
        }
