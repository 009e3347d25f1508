import os
import tempfile
import unittest


class TestBoardServices(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        db_fd, cls.db_path = tempfile.mkstemp(suffix=".db")
        os.close(db_fd)

        from board import create_app
        from board.db import db
        from board import errors
        from board.models.comment_model import Comment
        from board.models.vote_model import Vote
        from board.services import auth_service, comment_service, post_service, vote_service
        from board.services.updates import PostUpdate

        cls.app = create_app({
            "SQLALCHEMY_DATABASE_URI": f"sqlite:///{cls.db_path}",
            "JWT_SECRET_KEY": "test-secret-key-that-is-long-enough-for-hs256",
            "TESTING": True,
        })
        cls.db = db
        cls.errors = errors
        cls.Comment = Comment
        cls.Vote = Vote
        cls.auth_service = auth_service
        cls.post_service = post_service
        cls.comment_service = comment_service
        cls.vote_service = vote_service
        cls.PostUpdate = PostUpdate

    @classmethod
    def tearDownClass(cls):
        with cls.app.app_context():
            cls.db.engine.dispose()
        if os.path.exists(cls.db_path):
            os.remove(cls.db_path)

    def setUp(self):
        self.ctx = self.app.app_context()
        self.ctx.push()
        self.db.drop_all()
        self.db.create_all()

        self.alice = self._register("alice1")
        self.bob = self._register("bobby1")

    def tearDown(self):
        self.db.session.remove()
        self.ctx.pop()

    def _register(self, username):
        token = self.auth_service.register(f"{username}@example.com", username, "longenough123")
        return self.auth_service.verify(token)["id"]

    def test_create_post_requires_title(self):
        with self.assertRaises(self.errors.ValidationError):
            self.post_service.create_post(self.alice, "  ", "text")

    def test_get_and_list_include_derived_fields(self):
        post_id = self.post_service.create_post(self.alice, "hello", None, "https://example.com")

        post = self.post_service.get_post(post_id)
        self.assertEqual(post["username"], "alice1")
        self.assertEqual(post["comment_count"], "0")
        self.assertIsNone(post["text"])
        self.assertEqual(post["url"], "https://example.com")

        self.assertEqual(len(self.post_service.list_posts()), 1)

        with self.assertRaises(self.errors.NotFoundError):
            self.post_service.get_post(post_id + 100)

    def test_update_with_title_only_leaves_other_fields(self):
        post_id = self.post_service.create_post(self.alice, "hello", "text", "https://example.com")

        self.post_service.update_post(post_id, self.alice, self.PostUpdate(title="x"))

        post = self.post_service.get_post(post_id)
        self.assertEqual(post["title"], "x")
        self.assertEqual(post["text"], "text")
        self.assertEqual(post["url"], "https://example.com")

    def test_update_rejects_blank_title_and_non_owner(self):
        post_id = self.post_service.create_post(self.alice, "hello", "text")

        with self.assertRaises(self.errors.ValidationError):
            self.post_service.update_post(post_id, self.alice, self.PostUpdate(title=""))
        with self.assertRaises(self.errors.ForbiddenError):
            self.post_service.update_post(post_id, self.bob, self.PostUpdate(title="x"))
        with self.assertRaises(self.errors.NotFoundError):
            self.post_service.update_post(post_id + 100, self.alice, self.PostUpdate(title="x"))

    def test_delete_by_owner_and_non_owner(self):
        post_id = self.post_service.create_post(self.alice, "hello", "text")

        with self.assertRaises(self.errors.ForbiddenError):
            self.post_service.delete_post(post_id, self.bob)
        self.assertEqual(self.post_service.get_post(post_id)["id"], post_id)

        self.post_service.delete_post(post_id, self.alice)
        with self.assertRaises(self.errors.NotFoundError):
            self.post_service.get_post(post_id)

    def test_delete_post_removes_votes_on_post_and_comments(self):
        post_id = self.post_service.create_post(self.alice, "hello", "text")
        comment_id = self.comment_service.add_comment(post_id, self.bob, "nice")
        self.vote_service.vote(self.bob, "post", post_id, "up")
        self.vote_service.vote(self.alice, "comment", comment_id, "up")

        self.post_service.delete_post(post_id, self.alice)

        self.assertEqual(self.Vote.query.count(), 0)
        self.assertEqual(self.Comment.query.count(), 0)

    def test_add_comment_to_missing_post_creates_no_row(self):
        with self.assertRaises(self.errors.NotFoundError):
            self.comment_service.add_comment(999, self.alice, "hello")
        self.assertEqual(self.Comment.query.count(), 0)

    def test_comment_length_bounds(self):
        post_id = self.post_service.create_post(self.alice, "hello", "text")

        with self.assertRaises(self.errors.ValidationError):
            self.comment_service.add_comment(post_id, self.alice, "   ")
        with self.assertRaises(self.errors.ValidationError):
            self.comment_service.add_comment(post_id, self.alice, "x" * 10001)

    def test_comments_listed_in_creation_order(self):
        post_id = self.post_service.create_post(self.alice, "hello", "text")
        first = self.comment_service.add_comment(post_id, self.alice, "first")
        second = self.comment_service.add_comment(post_id, self.bob, "second", parent_id=first)
        third = self.comment_service.add_comment(post_id, self.alice, "third")

        comments = self.comment_service.list_comments(post_id)
        self.assertEqual([c["id"] for c in comments], [first, second, third])
        self.assertEqual(comments[1]["parentId"], first)
        self.assertEqual(comments[1]["username"], "bobby1")

    def test_vote_same_direction_twice_is_idempotent(self):
        post_id = self.post_service.create_post(self.alice, "hello", "text")

        first = self.vote_service.vote(self.bob, "post", post_id, "up")
        second = self.vote_service.vote(self.bob, "post", post_id, "up")

        self.assertEqual(first, {"upvotes": 1, "downvotes": 0})
        self.assertEqual(second, first)
        self.assertEqual(self.Vote.query.count(), 1)

    def test_vote_flip_moves_one_count(self):
        post_id = self.post_service.create_post(self.alice, "hello", "text")
        self.vote_service.vote(self.alice, "post", post_id, "up")
        before = self.vote_service.vote(self.bob, "post", post_id, "up")

        after = self.vote_service.vote(self.bob, "post", post_id, "down")

        self.assertEqual(after["upvotes"], before["upvotes"] - 1)
        self.assertEqual(after["downvotes"], before["downvotes"] + 1)

    def test_unvote_is_noop_without_vote(self):
        post_id = self.post_service.create_post(self.alice, "hello", "text")

        counts = self.vote_service.unvote(self.bob, "post", post_id)
        self.assertEqual(counts, {"upvotes": 0, "downvotes": 0})

        self.vote_service.vote(self.bob, "post", post_id, "down")
        counts = self.vote_service.unvote(self.bob, "post", post_id)
        self.assertEqual(counts, {"upvotes": 0, "downvotes": 0})
        self.assertEqual(self.Vote.query.count(), 0)

    def test_vote_on_missing_target(self):
        with self.assertRaises(self.errors.NotFoundError):
            self.vote_service.vote(self.alice, "comment", 999, "up")
        with self.assertRaises(self.errors.ValidationError):
            self.vote_service.vote(self.alice, "post", 1, "sideways")

    def test_post_update_record_tracks_supplied_fields(self):
        update = self.PostUpdate.from_mapping({"title": "x", "url": None, "ignored": 1})
        self.assertEqual(update.changes(), {"title": "x", "url": None})
        self.assertEqual(self.PostUpdate().changes(), {})


if __name__ == "__main__":
    unittest.main()
