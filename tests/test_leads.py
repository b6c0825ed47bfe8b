"""Tests for lead storage: defaults, filters, ordering, pagination and partial updates."""

import uuid
from datetime import datetime, timedelta

import pydantic
import pytest

from salesagency.core.exceptions import NotFoundError
from salesagency.models.enums import LeadStatus
from salesagency.models.lead import Lead
from salesagency.repositories.lead_repo import LeadRepository
from salesagency.schemas.lead import LeadCreate, LeadFilter, LeadUpdate


class TestCreate:

    @pytest.mark.asyncio
    async def test_defaults_applied_when_omitted(self, jane) -> None:
        assert jane.status == LeadStatus.NEW
        assert jane.intent_score == 0.5
        assert jane.tags == []
        assert isinstance(jane.id, uuid.UUID)
        assert isinstance(jane.created_at, datetime)

    @pytest.mark.asyncio
    async def test_get_returns_what_was_stored(self, lead_service) -> None:
        created = await lead_service.create(LeadCreate(
            name="Road Runner",
            email="beep@acme.com",
            company="Acme",
            status=LeadStatus.ENGAGED,
            intent_score=0.9,
            tags=["inbound", "saas"],
            source="referral",
        ))
        fetched = await lead_service.get(created.id)
        assert fetched is not None
        assert fetched.name == "Road Runner"
        assert fetched.company == "Acme"
        assert fetched.status == LeadStatus.ENGAGED
        assert fetched.intent_score == 0.9
        assert fetched.tags == ["inbound", "saas"]
        assert fetched.source == "referral"

    @pytest.mark.asyncio
    async def test_timestamps_are_naive_utc(self, lead_service, agent_service, jane, agent) -> None:
        before = datetime.utcnow()
        fetched = await lead_service.get(jane.id)
        assert fetched.created_at.tzinfo is None
        assert fetched.created_at <= before

        await lead_service.assign_to_agent(jane.id, agent.id)
        updated = await lead_service.update(jane.id, LeadUpdate(notes="met at expo"))
        assert updated.updated_at.tzinfo is None
        assert updated.updated_at >= fetched.created_at
        assert [lead.id for lead in await agent_service.leads(agent.id)] == [jane.id]

    @pytest.mark.asyncio
    async def test_get_missing_is_none(self, lead_service) -> None:
        assert await lead_service.get(uuid.uuid4()) is None

    def test_intent_score_out_of_range_rejected(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            LeadCreate(name="X", email="x@acme.com", intent_score=1.5)

    def test_unknown_status_rejected(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            LeadCreate(name="X", email="x@acme.com", status="MAYBE")


class TestUpdate:

    @pytest.mark.asyncio
    async def test_partial_update_preserves_other_fields(self, lead_service) -> None:
        lead = await lead_service.create(LeadCreate(
            name="Jane Doe",
            email="jane@acme.com",
            status=LeadStatus.QUALIFIED,
            intent_score=0.7,
            tags=["vip"],
        ))
        updated = await lead_service.update(lead.id, LeadUpdate(notes="call back Monday"))

        assert updated.notes == "call back Monday"
        assert updated.status == LeadStatus.QUALIFIED
        assert updated.tags == ["vip"]
        assert updated.intent_score == 0.7
        assert updated.updated_at is not None

    @pytest.mark.asyncio
    async def test_explicit_null_clears_optional_field(self, lead_service) -> None:
        lead = await lead_service.create(LeadCreate(
            name="Jane Doe", email="jane@acme.com", company="Acme"
        ))
        updated = await lead_service.update(lead.id, LeadUpdate(company=None))
        assert updated.company is None
        assert updated.name == "Jane Doe"

    def test_explicit_null_on_required_field_rejected(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            LeadUpdate(status=None)

    @pytest.mark.asyncio
    async def test_update_missing_raises(self, lead_service) -> None:
        with pytest.raises(NotFoundError):
            await lead_service.update(uuid.uuid4(), LeadUpdate(notes="nobody"))


class TestDelete:

    @pytest.mark.asyncio
    async def test_delete_is_idempotent(self, lead_service, jane) -> None:
        lead_id = jane.id
        assert await lead_service.delete(lead_id) is True
        assert await lead_service.delete(lead_id) is False
        assert await lead_service.get(lead_id) is None


class TestList:

    @pytest.mark.asyncio
    async def test_no_filter_returns_all(self, lead_service) -> None:
        for i in range(3):
            await lead_service.create(LeadCreate(name=f"Lead {i}", email=f"l{i}@acme.com"))
        assert len(await lead_service.list()) == 3
        assert len(await lead_service.list(LeadFilter())) == 3

    @pytest.mark.asyncio
    async def test_min_intent_score(self, lead_service) -> None:
        for score in (0.2, 0.79, 0.8, 0.95):
            await lead_service.create(LeadCreate(
                name=f"Score {score}", email="s@acme.com", intent_score=score
            ))
        leads = await lead_service.list(LeadFilter(min_intent_score=0.8))
        assert sorted(lead.intent_score for lead in leads) == [0.8, 0.95]

    @pytest.mark.asyncio
    async def test_status_matches_any(self, lead_service) -> None:
        for status in (LeadStatus.NEW, LeadStatus.CONTACTED, LeadStatus.LOST):
            await lead_service.create(LeadCreate(name=status.value, email="s@acme.com", status=status))
        leads = await lead_service.list(
            LeadFilter(status=[LeadStatus.CONTACTED, LeadStatus.LOST])
        )
        assert {lead.status for lead in leads} == {LeadStatus.CONTACTED, LeadStatus.LOST}

    @pytest.mark.asyncio
    async def test_tags_overlap(self, lead_service) -> None:
        await lead_service.create(LeadCreate(name="A", email="a@acme.com", tags=["saas", "inbound"]))
        await lead_service.create(LeadCreate(name="B", email="b@acme.com", tags=["retail"]))
        await lead_service.create(LeadCreate(name="C", email="c@acme.com"))

        leads = await lead_service.list(LeadFilter(tags=["inbound", "fintech"]))
        assert [lead.name for lead in leads] == ["A"]

    @pytest.mark.asyncio
    async def test_filters_combine(self, lead_service) -> None:
        await lead_service.create(LeadCreate(
            name="Hot", email="h@acme.com", intent_score=0.9, source="linkedin"
        ))
        await lead_service.create(LeadCreate(
            name="Hot elsewhere", email="e@acme.com", intent_score=0.9, source="website"
        ))
        leads = await lead_service.list(LeadFilter(min_intent_score=0.8, source="linkedin"))
        assert [lead.name for lead in leads] == ["Hot"]

    @pytest.mark.asyncio
    async def test_last_contact_window(self, lead_service) -> None:
        now = datetime(2024, 3, 1)
        old = await lead_service.create(LeadCreate(name="Old", email="o@acme.com"))
        recent = await lead_service.create(LeadCreate(name="Recent", email="r@acme.com"))
        await lead_service.update(old.id, LeadUpdate(last_contact=now - timedelta(days=30)))
        await lead_service.update(recent.id, LeadUpdate(last_contact=now - timedelta(days=1)))

        leads = await lead_service.list(LeadFilter(last_contact_after=now - timedelta(days=7)))
        assert [lead.name for lead in leads] == ["Recent"]
        leads = await lead_service.list(LeadFilter(last_contact_before=now - timedelta(days=7)))
        assert [lead.name for lead in leads] == ["Old"]

    @pytest.mark.asyncio
    async def test_pagination_over_newest_first(self, session) -> None:
        repo = LeadRepository(session)
        base = datetime(2024, 1, 1)
        for i in range(1, 6):
            await repo.create(Lead(
                name=f"Lead {i}", email=f"l{i}@acme.com", created_at=base + timedelta(days=i)
            ))

        page = await repo.list(limit=2, offset=2)
        # Newest first: 5, 4, 3, 2, 1
        assert [lead.name for lead in page] == ["Lead 3", "Lead 2"]

    @pytest.mark.asyncio
    async def test_offset_past_end_is_empty(self, lead_service, jane) -> None:
        assert await lead_service.list(limit=10, offset=5) == []
