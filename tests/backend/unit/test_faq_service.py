"""
Unit tests for services.faq_service.
The pure helpers are tested directly; the CRUD functions run against the
in-memory SQLite database from the ``db`` fixture.
"""
import pytest

from storefront.core.errors import NotFoundError, ValidationError
from storefront.schemas.faq import FaqCreateIn, FaqOut, FaqUpdateIn
from storefront.services import faq_service
from storefront.services.faq_service import categories_of, count_categories, filter_faqs


def _faq(id, category, question, answer, tags=None):
    return FaqOut(id=id, category=category, question=question, answer=answer, tags=tags or [])


ITEMS = [
    _faq(1, "결제", "결제 수단 안내", "카드 가능", ["카드"]),
    _faq(2, "배송", "Delivery time", "About 2 DAYS", ["shipping"]),
    _faq(3, "회원", "탈퇴 방법", "설정에서 가능합니다", ["결제취소"]),
]


class TestFilterFaqs:

    def test_no_filters_keeps_everything(self):
        assert filter_faqs(ITEMS) == ITEMS

    def test_all_sentinel_equals_no_filter(self):
        assert filter_faqs(ITEMS, category="all") == filter_faqs(ITEMS)

    def test_category(self):
        assert [f.id for f in filter_faqs(ITEMS, category="배송")] == [2]

    def test_unknown_category_is_empty(self):
        assert filter_faqs(ITEMS, category="없음") == []

    def test_search_question_and_tag(self):
        assert [f.id for f in filter_faqs(ITEMS, search="결제")] == [1, 3]

    def test_search_is_case_insensitive_substring(self):
        assert [f.id for f in filter_faqs(ITEMS, search="2 days")] == [2]
        assert [f.id for f in filter_faqs(ITEMS, search="SHIP")] == [2]

    def test_category_and_search_combine(self):
        assert filter_faqs(ITEMS, category="회원", search="카드") == []


class TestCategoriesAndCounts:

    def test_categories_start_with_all_and_are_distinct(self):
        assert categories_of(["결제", "배송", "결제"]) == ["all", "결제", "배송"]

    def test_counts_total_matches_sum(self):
        counts = count_categories(["결제", "배송", "결제", "회원"])
        assert counts == {"all": 4, "결제": 2, "배송": 1, "회원": 1}
        assert counts["all"] == sum(v for k, v in counts.items() if k != "all")


@pytest.mark.asyncio
class TestCrud:

    async def test_create_update_delete(self, db):
        created = await faq_service.create_faq(FaqCreateIn(category="결제", question="q", answer="a"))
        assert created.tags == []

        updated = await faq_service.update_faq(created.id, FaqUpdateIn(question="q2", tags=["t"]))
        assert updated.question == "q2"
        assert updated.answer == "a"
        assert updated.tags == ["t"]

        await faq_service.delete_faq(created.id)
        with pytest.raises(NotFoundError):
            await faq_service.get_faq(created.id)

    async def test_missing_ids_raise_not_found(self, db):
        with pytest.raises(NotFoundError):
            await faq_service.update_faq(404, FaqUpdateIn(answer="x"))
        with pytest.raises(NotFoundError):
            await faq_service.delete_faq(404)

    async def test_reserved_category_is_rejected(self, db):
        with pytest.raises(ValidationError):
            await faq_service.create_faq(FaqCreateIn(category="all", question="q", answer="a"))

    async def test_counts_and_categories_from_store(self, db):
        for category in ["배송", "결제", "배송"]:
            await faq_service.create_faq(FaqCreateIn(category=category, question="q", answer="a"))
        assert await faq_service.list_categories() == ["all", "배송", "결제"]
        assert await faq_service.count_by_category() == {"all": 3, "배송": 2, "결제": 1}
