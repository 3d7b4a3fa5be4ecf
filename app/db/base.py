# Import all models here so metadata.create_all can see them
from app.db.session import Base

# Import all models below
from app.modules.user_management.models.user import User
from app.modules.authors.models.author import Author
from app.modules.posts.models.post import Post
