from tagpages.repos.posts_repo import CouchPostsRepo, FilePostsRepo
from tests.conftest import FakeCouchDB


def test_couch_list_blog_docs_filters_plain_prefix_and_deleted():
    docs = {
        "ok": {"_id": "blog/post.md", "path": "blog/post.md", "type": "plain"},
        "other_prefix": {
            "_id": "notes/file.md",
            "path": "notes/file.md",
            "type": "plain",
        },
        "not_plain": {"_id": "blog/bad.md", "path": "blog/bad.md", "type": "leaf"},
        "deleted": {
            "_id": "blog/old.md",
            "path": "blog/old.md",
            "type": "plain",
            "deleted": True,
        },
    }
    repo = CouchPostsRepo(FakeCouchDB(docs))

    result = repo.list_blog_docs()

    assert result == [docs["ok"]]


def test_couch_is_valid_uses_id_when_path_missing():
    repo = CouchPostsRepo(FakeCouchDB({}), prefix="blog/")
    assert repo._is_valid({"_id": "blog/x.md", "type": "plain"}) is True
    assert repo._is_valid(None) is False


def test_couch_list_blog_docs_honours_custom_prefix():
    docs = {
        "post": {"_id": "posts/a.md", "path": "posts/a.md", "type": "plain"},
        "blog": {"_id": "blog/b.md", "path": "blog/b.md", "type": "plain"},
    }
    repo = CouchPostsRepo(FakeCouchDB(docs), prefix="posts/")

    assert repo.list_blog_docs() == [docs["post"]]


def test_file_repo_reads_markdown_under_prefix(tmp_path):
    blog = tmp_path / "blog"
    (blog / "2024").mkdir(parents=True)
    (blog / "b.md").write_text("---\ntitle: B\n---\nbody", encoding="utf-8")
    (blog / "2024" / "a.md").write_text("A body", encoding="utf-8")
    (blog / "notes.txt").write_text("ignored", encoding="utf-8")
    (tmp_path / "about.md").write_text("not a post", encoding="utf-8")

    docs = FilePostsRepo(tmp_path).list_blog_docs()

    assert [doc["path"] for doc in docs] == ["blog/2024/a.md", "blog/b.md"]
    assert docs[0] == {
        "_id": "blog/2024/a.md",
        "path": "blog/2024/a.md",
        "type": "plain",
        "content": "A body",
    }


def test_file_repo_missing_directory(tmp_path):
    assert FilePostsRepo(tmp_path / "nowhere").list_blog_docs() == []


def test_file_repo_honours_custom_prefix(tmp_path):
    (tmp_path / "posts").mkdir()
    (tmp_path / "blog").mkdir()
    (tmp_path / "posts" / "a.md").write_text("A", encoding="utf-8")
    (tmp_path / "blog" / "b.md").write_text("B", encoding="utf-8")

    docs = FilePostsRepo(tmp_path, prefix="posts/").list_blog_docs()

    assert [doc["path"] for doc in docs] == ["posts/a.md"]
