import pytest

from postview.domain.models import PostQuery
from postview.errors import DeleteError
from postview.infrastructure.repositories import InMemoryPostRepository


def test_pages_follow_offset(repository):
    page = repository.list_posts(PostQuery(owner_id=1, page=2, limit=4))
    assert [p.id for p in page.items] == [9, 10]
    assert page.total_count == 10


def test_delete_shifts_later_posts_forward(repository):
    repository.delete_post(2)

    page = repository.list_posts(PostQuery(owner_id=1, page=0, limit=4))

    assert [p.id for p in page.items] == [1, 3, 4, 5]
    assert page.total_count == 9
    assert repository.requests[0] == ("delete", 2)


def test_delete_unknown_post(repository):
    with pytest.raises(DeleteError):
        repository.delete_post(999)


def test_demo_data_shape():
    repo = InMemoryPostRepository.with_demo_data(owner_count=3, posts_per_owner=5)

    owners = repo.list_owners()
    page = repo.list_posts(PostQuery(owner_id=2, page=0, limit=12))

    assert [o.id for o in owners] == [1, 2, 3]
    assert owners[1].name == "Ervin Howell"
    assert [p.id for p in page.items] == [6, 7, 8, 9, 10]
    assert page.items[0].title == "Ervin's post #1"
