"""
Product Model
"""

from shop.extensions import db


class Product(db.Model):
    """A document of the `productos` collection"""
    __tablename__ = 'productos'
    # AUTOINCREMENT keeps ids monotonic: a deleted id is never handed out again
    __table_args__ = {'sqlite_autoincrement': True}

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    code = db.Column(db.Integer, nullable=False)
    name = db.Column(db.String(120), nullable=False, index=True)
    price = db.Column(db.Float, nullable=False)
    category = db.Column(db.String(80), nullable=False)

    def to_dict(self):
        return {
            'id': self.id,
            'code': self.code,
            'name': self.name,
            'price': self.price,
            'category': self.category,
        }

    def __repr__(self):
        return f'<Product {self.id} {self.name}>'
