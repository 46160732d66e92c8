from blog_api.app.schemas.post import PostWrite
from blog_api.app.services.post_service import PostService, search_filter

from conftest import insert_post, insert_user, run


def test_listing_is_newest_first_with_id_tie_break() -> None:
    user_id = insert_user("Alice", "alice@example.com")
    older = insert_post(user_id, "older", created_at="2024-01-01 09:00:00")
    same_a = insert_post(user_id, "same a", created_at="2024-01-02 09:00:00")
    same_b = insert_post(user_id, "same b", created_at="2024-01-02 09:00:00")

    page = run(PostService.list_posts(1))

    assert [post.id for post in page.posts] == [same_b, same_a, older]
    assert page.posts[0].user.name == "Alice"
    assert page.posts[0].user_id == user_id


def test_pagination_slices_pages_of_ten() -> None:
    user_id = insert_user("Alice", "alice@example.com")
    ids = [insert_post(user_id, f"post {i}", created_at="2024-01-01 00:00:00") for i in range(23)]

    first = run(PostService.list_posts(1))
    last = run(PostService.list_posts(3))
    beyond = run(PostService.list_posts(4))

    assert [post.id for post in first.posts] == list(reversed(ids))[:10]
    assert first.pagination.total == 23
    assert first.pagination.last_page == 3
    assert [post.id for post in last.posts] == list(reversed(ids))[20:]
    assert last.pagination.to == 23
    assert beyond.posts == []
    assert beyond.pagination.from_ is None
    assert beyond.pagination.to is None


def test_list_user_posts_only_returns_owned_posts() -> None:
    alice = insert_user("Alice", "alice@example.com")
    bob = insert_user("Bob", "bob@example.com")
    insert_post(alice, "mine")
    insert_post(bob, "theirs")

    page = run(PostService.list_user_posts(alice, 1))

    assert [post.title for post in page.posts] == ["mine"]
    assert page.pagination.total == 1


def test_search_is_case_insensitive_on_title_and_body() -> None:
    user_id = insert_user("Alice", "alice@example.com")
    hello = insert_post(user_id, "Hello World", "nothing here")
    in_body = insert_post(user_id, "Other", "the world is round")
    insert_post(user_id, "Unrelated", "text")

    by_title = run(PostService.search_posts("hello", 1))
    by_either = run(PostService.search_posts("WORLD", 1))

    assert [post.id for post in by_title.posts] == [hello]
    assert {post.id for post in by_either.posts} == {hello, in_body}
    assert by_either.pagination.total == 2


def test_search_treats_wildcards_literally() -> None:
    user_id = insert_user("Alice", "alice@example.com")
    percent = insert_post(user_id, "100% sure", "body")
    underscore = insert_post(user_id, "snake_case", "body")
    insert_post(user_id, "plain", "body")

    assert [post.id for post in run(PostService.search_posts("%", 1)).posts] == [percent]
    assert [post.id for post in run(PostService.search_posts("_", 1)).posts] == [underscore]


def test_search_filter_passes_the_term_unchanged() -> None:
    clause, params = search_filter("50%_off")

    assert "casefold(p.title)" in clause and "casefold(p.body)" in clause
    assert params == ("50%_off", "50%_off")


def test_search_folds_case_beyond_ascii() -> None:
    user_id = insert_user("Alice", "alice@example.com")
    umlaut = insert_post(user_id, "Über Straße", "body")
    accented = insert_post(user_id, "Plain", "CAFÉ society")
    plain_ascii = insert_post(user_id, "Uber", "strasse")

    assert [post.id for post in run(PostService.search_posts("über", 1)).posts] == [umlaut]
    assert {post.id for post in run(PostService.search_posts("STRASSE", 1)).posts} == {umlaut, plain_ascii}
    assert [post.id for post in run(PostService.search_posts("café", 1)).posts] == [accented]


def test_page_far_beyond_the_end_is_empty() -> None:
    user_id = insert_user("Alice", "alice@example.com")
    insert_post(user_id, "only", "body")

    page = run(PostService.list_posts(2**62))

    assert page.posts == []
    assert page.pagination.total == 1
    assert page.pagination.from_ is None


def test_create_update_and_delete_round_trip() -> None:
    user_id = insert_user("Alice", "alice@example.com")

    created = run(PostService.create_post(PostWrite(title="A", body="B"), user_id))
    assert created.user_id == user_id
    assert (created.title, created.body) == ("A", "B")

    updated = run(PostService.update_post(created.id, PostWrite(title="A2", body="B2")))
    assert updated is not None
    assert (updated.id, updated.title, updated.body, updated.user_id) == (created.id, "A2", "B2", user_id)

    assert run(PostService.delete_post(created.id)) is True
    assert run(PostService.get_post(created.id)) is None
    assert run(PostService.delete_post(created.id)) is False


def test_update_of_missing_post_returns_none() -> None:
    assert run(PostService.update_post(999, PostWrite(title="A", body="B"))) is None
