"""
Tests for table creation, seeding and connection settings.
"""

import pytest
from sqlalchemy import inspect
from sqlalchemy.exc import SQLAlchemyError

from app.core.config import Settings
from app.db.init_db import create_all_tables
from app.db.session import Database
from app.modules.authors.models.author import Author
from app.modules.posts.models.post import Post
import seed_db


class TestCreateAllTables:

    def test_creates_the_three_tables(self, database):
        created = create_all_tables(database)

        assert created == {"users", "authors", "posts"}
        assert set(inspect(database.engine).get_table_names()) == {"users", "authors", "posts"}

    def test_is_idempotent(self, database):
        create_all_tables(database)

        assert create_all_tables(database) == set()

    def test_failure_is_raised(self, tmp_path):
        database = Database(f"sqlite:///{tmp_path / 'nope' / 'blog.db'}")

        with pytest.raises(SQLAlchemyError):
            create_all_tables(database)


class TestSeed:

    def test_seed_inserts_demo_rows_once(self, database):
        create_all_tables(database)

        with database.session() as db:
            first = seed_db.seed(db)
            second = seed_db.seed(db)

            assert first == len(seed_db.DEMO_AUTHORS) + len(seed_db.DEMO_POSTS)
            assert second == 0
            assert db.query(Author).count() == 2
            assert db.query(Post).count() == 2

    def test_seeded_posts_join_their_authors(self, database):
        create_all_tables(database)

        with database.session() as db:
            seed_db.seed(db)
            post = db.query(Post).filter(Post.author_id == "author-1").one()

            assert post.author.name == "Author 1"


class TestSettings:

    def test_database_url_wins(self):
        settings = Settings(DATABASE_URL="sqlite:///blog.db")

        assert settings.database_url == "sqlite:///blog.db"

    def test_unix_socket_url(self):
        settings = Settings(
            DATABASE_URL=None,
            DB_USER="blog",
            DB_PASSWORD="secret",
            DB_NAME="blogdb",
            DB_HOST="/cloudsql/project:region:instance",
        )

        url = settings.database_url
        assert url.drivername == "mysql+pymysql"
        assert url.username == "blog"
        assert url.password == "secret"
        assert url.host is None
        assert url.database == "blogdb"
        assert url.query["unix_socket"] == "/cloudsql/project:region:instance"

    def test_tcp_host_url(self):
        settings = Settings(DATABASE_URL=None, DB_USER="blog", DB_NAME="blogdb", DB_HOST="10.0.0.5")

        url = settings.database_url
        assert url.host == "10.0.0.5"
        assert "unix_socket" not in url.query

    def test_port_defaults_to_8080(self, monkeypatch):
        monkeypatch.delenv("PORT", raising=False)

        assert Settings().PORT == 8080

    def test_port_from_environment(self, monkeypatch):
        monkeypatch.setenv("PORT", "9000")

        assert Settings().PORT == 9000

    def test_cors_origins_from_comma_list(self, monkeypatch):
        monkeypatch.setenv("BACKEND_CORS_ORIGINS", "https://a.example.com, https://b.example.com")

        assert Settings().BACKEND_CORS_ORIGINS == ["https://a.example.com", "https://b.example.com"]
