from models import db


# زائر الموقع: سجل واحد لكل عنوان IP في اليوم
class SiteVisitor(db.Model):
    __tablename__ = 'site_visitors'
    __table_args__ = (
        db.UniqueConstraint('ip_address', 'visit_date', name='uq_visitor_ip_date'),
    )
    id = db.Column(db.Integer, primary_key=True)
    ip_address = db.Column(db.String(45), nullable=False)
    visit_date = db.Column(db.Date, nullable=False, index=True)
    user_agent = db.Column(db.String(255), nullable=True)
    page_url = db.Column(db.String(500), nullable=True)
    referrer = db.Column(db.String(500), nullable=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=True)

    def __repr__(self):
        return f'<SiteVisitor {self.ip_address} {self.visit_date}>'
