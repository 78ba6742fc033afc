import io
import uuid
from decimal import Decimal

import pytest
from sqlalchemy.exc import OperationalError

from crowdfund.db import models
from crowdfund.db.repositories import campaigns as campaign_repo
from crowdfund.services import donation_service
from crowdfund.services.image_storage import IMAGE_ONLY, IMAGE_REQUIRED
from crowdfund.utils import config
from crowdfund.utils.feature_flags import refresh_feature_flag_cache

PNG_BYTES = b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR"


def _form(**overrides):
    data = {
        "title": "School library for Kothur",
        "description": "Shelves, books and a reading corner for 300 students.",
        "target_amount": "250000",
        "creator_name": "Lakshmi Iyer",
        "days_left": "40",
    }
    data.update(overrides)
    return data


def _image(name="cover.png", content_type="image/png", body=PNG_BYTES):
    return {"image": (name, io.BytesIO(body), content_type)}


def test_list_campaigns_empty(client):
    r = client.get("/api/campaigns")
    assert r.status_code == 200
    assert r.json() == {"success": True, "campaigns": []}


def test_create_campaign_with_image(client, db_session):
    r = client.post("/api/campaigns", data=_form(), files=_image())
    assert r.status_code == 201, r.text
    body = r.json()
    assert body["success"] is True
    assert body["message"] == "Campaign created successfully"

    campaign = db_session.get(models.Campaign, uuid.UUID(body["campaign_id"]))
    assert campaign.raised_amount == 0
    assert campaign.supporters == 0
    assert campaign.target_amount == Decimal("250000")
    assert campaign.image.endswith(".png")
    assert (config.upload_dir() / campaign.image).read_bytes() == PNG_BYTES

    served = client.get(f"/uploads/{campaign.image}")
    assert served.status_code == 200
    assert served.content == PNG_BYTES


def test_create_campaign_without_image_is_rejected(client, db_session):
    r = client.post("/api/campaigns", data=_form())
    assert r.status_code == 400
    assert r.json() == {"success": False, "message": IMAGE_REQUIRED}
    assert campaign_repo.count_campaigns(db_session) == 0


def test_create_campaign_rejects_non_image_upload(client, db_session):
    before = set(config.upload_dir().iterdir()) if config.upload_dir().exists() else set()
    r = client.post(
        "/api/campaigns",
        data=_form(),
        files=_image(name="notes.pdf", content_type="application/pdf", body=b"%PDF-1.7"),
    )
    assert r.status_code == 400
    assert r.json()["message"] == IMAGE_ONLY
    assert campaign_repo.count_campaigns(db_session) == 0
    assert set(config.upload_dir().iterdir()) == before


def test_create_campaign_validates_fields(client, db_session):
    for bad in ({"target_amount": "0"}, {"target_amount": "-100"}, {"target_amount": "lots"}, {"days_left": "-1"}):
        r = client.post("/api/campaigns", data=_form(**bad), files=_image())
        assert r.status_code == 400, bad
        assert r.json()["success"] is False
    r = client.post("/api/campaigns", data={"title": "only a title"}, files=_image())
    assert r.status_code == 400
    assert campaign_repo.count_campaigns(db_session) == 0


def test_create_campaign_removes_image_when_insert_fails(client, monkeypatch):
    upload_dir = config.upload_dir()
    upload_dir.mkdir(parents=True, exist_ok=True)
    before = set(upload_dir.iterdir())

    def _fail(db, campaign, image):
        raise OperationalError("INSERT INTO campaigns", {}, Exception("database is locked"))

    monkeypatch.setattr(campaign_repo, "create_campaign", _fail)

    r = client.post("/api/campaigns", data=_form(), files=_image())
    assert r.status_code == 500
    assert r.json() == {"success": False, "message": "A database error occurred"}
    assert set(upload_dir.iterdir()) == before


def test_campaigns_listed_newest_first_with_progress(client, make_campaign, timestamps):
    make_campaign(title="first", raised_amount=Decimal("1"), target_amount=Decimal("3"), created_at=timestamps[0])
    make_campaign(title="second", raised_amount=Decimal("2"), target_amount=Decimal("3"), created_at=timestamps[1])
    make_campaign(title="third", target_amount=Decimal("500"), created_at=timestamps[2])

    campaigns = client.get("/api/campaigns").json()["campaigns"]

    assert [c["title"] for c in campaigns] == ["third", "second", "first"]
    assert [c["progress_percentage"] for c in campaigns] == [0.0, 66.67, 33.33]


def test_get_campaign(client, make_campaign):
    campaign = make_campaign(raised_amount=Decimal("25000"), target_amount=Decimal("100000"), supporters=12)

    r = client.get(f"/api/campaigns/{campaign.id}")
    assert r.status_code == 200
    body = r.json()["campaign"]
    assert body["id"] == str(campaign.id)
    assert body["raised_amount"] == 25000.0
    assert body["progress_percentage"] == 25.0
    assert body["supporters"] == 12


def test_get_unknown_campaign_is_404(client):
    r = client.get(f"/api/campaigns/{uuid.uuid4()}")
    assert r.status_code == 404
    assert r.json() == {"success": False, "message": "Campaign not found"}


def test_malformed_campaign_id_is_400(client):
    r = client.get("/api/campaigns/not-a-uuid")
    assert r.status_code == 400
    assert r.json()["success"] is False


def test_donate_updates_progress(client, make_campaign):
    campaign = make_campaign(raised_amount=Decimal("25000"), target_amount=Decimal("100000"), supporters=7)

    r = client.post(f"/api/campaigns/{campaign.id}/donate", json={"donor_name": "Farah", "amount": 5000})

    assert r.status_code == 200
    assert r.json() == {
        "success": True,
        "message": "Donation successful",
        "campaign": {
            "raised_amount": 30000.0,
            "target_amount": 100000.0,
            "supporters": 8,
            "progress_percentage": 30.0,
        },
    }


def test_donate_to_unknown_campaign_is_404(client, make_campaign, db_session):
    make_campaign()
    r = client.post(f"/api/campaigns/{uuid.uuid4()}/donate", json={"donor_name": "Farah", "amount": 50})
    assert r.status_code == 404
    assert db_session.query(models.Donation).count() == 0


def test_donate_rejects_bad_payloads(client, make_campaign, db_session):
    campaign = make_campaign()
    for payload in (
        {"donor_name": "Farah", "amount": 0},
        {"donor_name": "Farah", "amount": -10},
        {"donor_name": "", "amount": 10},
        {"amount": 10},
        {"donor_name": "Farah"},
        {"donor_name": "Farah", "amount": "ten"},
    ):
        r = client.post(f"/api/campaigns/{campaign.id}/donate", json=payload)
        assert r.status_code == 400, payload
        assert r.json()["success"] is False
    db_session.expire_all()
    assert db_session.get(models.Campaign, campaign.id).supporters == 0


def test_donate_database_failure_is_500(client, make_campaign, monkeypatch):
    campaign = make_campaign()

    def _boom(db, campaign_id, amount):
        raise OperationalError("UPDATE campaigns", {}, Exception("disk I/O error"))

    monkeypatch.setattr(campaign_repo, "increment_campaign_totals", _boom)

    r = client.post(f"/api/campaigns/{campaign.id}/donate", json={"donor_name": "Farah", "amount": 10})
    assert r.status_code == 500
    assert r.json() == {"success": False, "message": "Server error processing donation."}


def test_list_donations_newest_first(client, make_campaign, db_session, timestamps):
    campaign = make_campaign()
    other = make_campaign(title="other")
    for i, name in enumerate(["early", "middle", "late"]):
        db_session.add(models.Donation(campaign_id=campaign.id, donor_name=name, amount=Decimal("10"), created_at=timestamps[i]))
    db_session.add(models.Donation(campaign_id=other.id, donor_name="elsewhere", amount=Decimal("10")))
    db_session.commit()

    r = client.get(f"/api/campaigns/{campaign.id}/donations")
    assert r.status_code == 200
    assert [d["donor_name"] for d in r.json()["donations"]] == ["late", "middle", "early"]


def test_list_donations_after_donating(client, make_campaign):
    campaign = make_campaign()
    client.post(f"/api/campaigns/{campaign.id}/donate", json={"donor_name": "Farah", "amount": 12.5})

    donations = client.get(f"/api/campaigns/{campaign.id}/donations").json()["donations"]
    assert len(donations) == 1
    assert donations[0]["donor_name"] == "Farah"
    assert donations[0]["amount"] == 12.5
    assert donations[0]["campaign_id"] == str(campaign.id)


def test_list_donations_returns_full_history_by_default(client, make_campaign, db_session):
    campaign = make_campaign()
    for i in range(105):
        donation_service.donate(db_session, campaign.id, f"donor-{i}", Decimal("1"))

    body = client.get(f"/api/campaigns/{campaign.id}/donations").json()
    assert len(body["donations"]) == 105
    assert body["total"] == 105


def test_list_donations_pages_with_skip_and_limit(client, make_campaign, db_session, timestamps):
    campaign = make_campaign()
    for i in range(5):
        db_session.add(models.Donation(campaign_id=campaign.id, donor_name=f"d{i}", amount=Decimal("10"), created_at=timestamps[i]))
    db_session.commit()

    body = client.get(f"/api/campaigns/{campaign.id}/donations?skip=1&limit=2").json()
    assert [d["donor_name"] for d in body["donations"]] == ["d3", "d2"]
    assert body["total"] == 5


@pytest.mark.parametrize("query", ["limit=-1&skip=-5", "skip=-1", "limit=0", "limit=1001", "limit=many"])
def test_list_donations_rejects_bad_paging(client, make_campaign, query):
    campaign = make_campaign()
    r = client.get(f"/api/campaigns/{campaign.id}/donations?{query}")
    assert r.status_code == 400
    assert r.json()["success"] is False


def test_list_donations_unknown_campaign_is_404(client):
    r = client.get(f"/api/campaigns/{uuid.uuid4()}/donations")
    assert r.status_code == 404


def test_progress_override(client, make_campaign):
    campaign = make_campaign(target_amount=Decimal("80000"), supporters=4)

    r = client.put(f"/api/campaigns/{campaign.id}/progress", json={"raised_amount": 20000})

    assert r.status_code == 200
    body = r.json()
    assert body["message"] == "Progress updated successfully"
    assert body["campaign"]["raised_amount"] == 20000.0
    assert body["campaign"]["progress_percentage"] == 25.0
    assert body["campaign"]["supporters"] == 4


def test_progress_override_validation_and_404(client, make_campaign):
    campaign = make_campaign()
    assert client.put(f"/api/campaigns/{campaign.id}/progress", json={"raised_amount": -1}).status_code == 400
    assert client.put(f"/api/campaigns/{uuid.uuid4()}/progress", json={"raised_amount": 10}).status_code == 404


def test_progress_override_hidden_when_dev_endpoints_disabled(client, make_campaign, monkeypatch):
    campaign = make_campaign()
    monkeypatch.setenv("FEATURE_DEV_ENDPOINTS_ENABLED", "false")
    refresh_feature_flag_cache()

    r = client.put(f"/api/campaigns/{campaign.id}/progress", json={"raised_amount": 10})
    assert r.status_code == 404
    assert r.json()["success"] is False


def test_missing_upload_is_404(client):
    assert client.get("/uploads/does-not-exist.png").status_code == 404


def test_health(client):
    assert client.get("/health").json() == {"status": "ok", "service": "crowdfund-service"}
