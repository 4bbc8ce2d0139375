import pytest
from sqlalchemy import delete
from sqlalchemy.exc import IntegrityError

from villa_api.models.villa import Villa, VillaNumber
from villa_api.repository.villa_repository import VillaNumberRepository, VillaRepository


@pytest.fixture
def villa(db_session):
    return VillaRepository(db_session).create(Villa(name="Lake House", capacity=4, rate=150))


def test_villa_number_is_keyed_by_its_villa(db_session, villa):
    villa_number = VillaNumberRepository(db_session).create(
        VillaNumber(villa_id=villa.id, villa_no=101, special_details="Ground floor")
    )
    assert villa_number.villa_id == villa.id
    assert villa_number.villa.name == "Lake House"
    db_session.refresh(villa)
    assert villa.villa_number.villa_no == 101


def test_villa_number_for_missing_villa_violates_foreign_key(db_session):
    db_session.add(VillaNumber(villa_id=999, villa_no=101))
    with pytest.raises(IntegrityError):
        db_session.commit()


def test_second_villa_number_for_same_villa_is_rejected(db_session, villa):
    repo = VillaNumberRepository(db_session)
    villa_id = villa.id
    repo.create(VillaNumber(villa_id=villa_id, villa_no=101))
    db_session.expunge_all()

    with pytest.raises(IntegrityError):
        repo.create(VillaNumber(villa_id=villa_id, villa_no=102))


def test_duplicate_villa_no_is_rejected(db_session, villa):
    other = VillaRepository(db_session).create(Villa(name="Forest Cabin"))
    repo = VillaNumberRepository(db_session)
    repo.create(VillaNumber(villa_id=villa.id, villa_no=101))

    with pytest.raises(IntegrityError):
        repo.create(VillaNumber(villa_id=other.id, villa_no=101))


def test_deleting_villa_through_orm_removes_villa_number(db_session, villa):
    VillaNumberRepository(db_session).create(VillaNumber(villa_id=villa.id, villa_no=101))

    VillaRepository(db_session).remove(villa)

    assert db_session.query(VillaNumber).count() == 0


def test_database_cascade_removes_villa_number(db_session, villa):
    villa_id = villa.id
    VillaNumberRepository(db_session).create(VillaNumber(villa_id=villa_id, villa_no=101))
    db_session.expunge_all()

    # Core delete bypasses ORM cascades; only the FK's ON DELETE CASCADE applies
    db_session.execute(delete(Villa).where(Villa.id == villa_id))
    db_session.commit()

    assert db_session.query(VillaNumber).count() == 0


def test_search_filters_and_pages(db_session):
    repo = VillaRepository(db_session)
    for index, capacity in enumerate([2, 4, 4, 6]):
        repo.create(Villa(name=f"Villa {index}", capacity=capacity))

    assert [v.name for v in repo.search(capacity=4)] == ["Villa 1", "Villa 2"]
    assert [v.name for v in repo.search(search="villa 3")] == ["Villa 3"]
    assert [v.name for v in repo.search(page_size=3, page_number=2)] == ["Villa 3"]
    assert len(repo.search()) == 4
