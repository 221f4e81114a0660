import pytest

from glamour_storefront.core.application.contact.contact_service import ContactService
from glamour_storefront.core.exceptions.draft_validation_error import DraftValidationError
from glamour_storefront.core.exceptions.record_not_found_error import RecordNotFoundError
from glamour_storefront.infrastructure.persistence.in_memory_document_store import InMemoryDocumentStore


@pytest.fixture
def contact():
    return ContactService(InMemoryDocumentStore("contacts"))


@pytest.fixture
def submission():
    return {
        "name": "  Sara  ",
        "email": "sara@gmail.com",
        "phone": "03001234567",
        "subject": "Shade advice",
        "message": "Which foundation suits warm undertones?",
    }


@pytest.mark.asyncio
async def test_submit_stores_new_message(contact, submission):
    message = await contact.submit(submission)

    assert message["status"] == "new"
    assert message["name"] == "Sara"
    assert [m["id"] for m in await contact.list_messages()] == [message["id"]]


@pytest.mark.asyncio
async def test_message_length_is_capped(contact, submission):
    with pytest.raises(DraftValidationError):
        await contact.submit({**submission, "message": "x" * 5001})


@pytest.mark.asyncio
async def test_status_flow(contact, submission):
    message = await contact.submit(submission)

    await contact.update_status(message["id"], {"status": "replied"})

    assert await contact.list_messages(status="new") == []
    assert len(await contact.list_messages(status="replied")) == 1
    with pytest.raises(RecordNotFoundError):
        await contact.update_status("missing", {"status": "read"})
