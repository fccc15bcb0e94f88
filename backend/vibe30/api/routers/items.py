from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from vibe30.core.logging import logger
from vibe30.db.items import Item, get_items_db
from vibe30.schemas.items import ItemIn, ItemOut

router = APIRouter()


@router.get("", response_model=list[ItemOut])
def get_items(db: Session = Depends(get_items_db)):
    try:
        rows = db.query(Item).order_by(Item.id).all()
    except SQLAlchemyError as e:
        logger.exception("items_fetch_failed", error=str(e))
        return JSONResponse(status_code=500, content={"error": str(e)})
    return [ItemOut(id=r.id, name=r.name, created_at=r.created_at) for r in rows]


@router.post("")
def post_item(data: ItemIn | None = None, db: Session = Depends(get_items_db)):
    if data is None or not data.name:
        return JSONResponse(status_code=400, content={"error": "Name is required"})
    item = Item(name=data.name)
    try:
        db.add(item)
        db.commit()
        db.refresh(item)
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("item_create_failed", error=str(e))
        return JSONResponse(status_code=500, content={"error": str(e)})
    return {"id": item.id, "name": item.name}
