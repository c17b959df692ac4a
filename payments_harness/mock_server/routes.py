from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.orm import Session

from payments_harness.config import MockServerConfig
from payments_harness.log import get_logger
from payments_harness.mock_server.models import Record

logger = get_logger(__name__)

router = APIRouter()


def get_db(request: Request):
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


def get_config(request: Request) -> MockServerConfig:
    return request.app.state.config


async def read_object(request: Request) -> dict:
    try:
        body = await request.json()
    except ValueError:
        raise HTTPException(status_code=400, detail="Body must be valid JSON")
    if not isinstance(body, dict):
        raise HTTPException(status_code=400, detail="Body must be a JSON object")
    body.pop("id", None)
    return body


MAX_ID = 2**63 - 1


def parse_key(record_id: str) -> int | None:
    """Only canonical decimal ids that fit an SQLite integer name a record."""
    if not (record_id.isascii() and record_id.isdigit()):
        return None
    key = int(record_id)
    if str(key) != record_id or not 0 < key <= MAX_ID:
        return None
    return key


def find_record(db: Session, collection: str, record_id: str) -> Record | None:
    key = parse_key(record_id)
    if key is None:
        return None
    return db.query(Record).filter_by(collection=collection, id=key).first()


def enforce_rules(db: Session, collection: str, body: dict, creating: bool = False) -> None:
    """Business rules a production backend applies; only checked in strict mode.

    A new refund must name a payment; a merge only checks the fields it sends.
    """
    amount = body.get("amount")
    if isinstance(amount, (int, float)) and amount < 0:
        raise HTTPException(status_code=400, detail="amount must not be negative")

    if collection == "refunds" and creating and "payment_id" not in body:
        raise HTTPException(status_code=400, detail="payment_id is required")

    if collection == "refunds" and "payment_id" in body:
        if find_record(db, "payments", str(body["payment_id"])) is None:
            raise HTTPException(status_code=404, detail="Payment not found")


@router.get("/{collection}")
def list_records(collection: str, db: Session = Depends(get_db)):
    records = db.query(Record).filter_by(collection=collection).order_by(Record.id).all()
    return [r.to_dict() for r in records]


@router.post("/{collection}", status_code=201)
def create_record(
    collection: str,
    body: dict = Depends(read_object),
    db: Session = Depends(get_db),
    config: MockServerConfig = Depends(get_config),
):
    if config.strict:
        enforce_rules(db, collection, body, creating=True)

    record = Record(collection=collection, data=body)
    db.add(record)
    db.commit()
    db.refresh(record)

    logger.info("record stored", collection=collection, id=record.id)
    return record.to_dict()


@router.get("/{collection}/{record_id}")
def get_record(collection: str, record_id: str, db: Session = Depends(get_db)):
    record = find_record(db, collection, record_id)
    if not record:
        raise HTTPException(status_code=404, detail="Not Found")
    return record.to_dict()


@router.put("/{collection}/{record_id}")
def update_record(
    collection: str,
    record_id: str,
    body: dict = Depends(read_object),
    db: Session = Depends(get_db),
    config: MockServerConfig = Depends(get_config),
):
    record = find_record(db, collection, record_id)
    if not record:
        raise HTTPException(status_code=404, detail="Not Found")

    if config.strict:
        enforce_rules(db, collection, body)

    # JSON columns only notice reassignment, not in-place mutation
    record.data = {**record.data, **body}
    db.commit()
    db.refresh(record)
    return record.to_dict()


@router.delete("/{collection}/{record_id}")
def delete_record(collection: str, record_id: str, db: Session = Depends(get_db)):
    record = find_record(db, collection, record_id)
    if not record:
        raise HTTPException(status_code=404, detail="Not Found")

    db.delete(record)
    db.commit()

    logger.info("record deleted", collection=collection, id=int(record_id))
    return {}
