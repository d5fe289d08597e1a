# salon_api/routers/products_routes.py

import logging

from fastapi import APIRouter, Depends
from sqlalchemy import func
from sqlmodel import Session, select

from salon_api.deps import get_session
from salon_api.models import Product
from salon_api.schemas import ProductCreate, ProductRemove

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["products"],
)


def product_public(product: Product) -> dict:
    return {
        "id": product.id,
        "name": product.name,
        "image": product.image,
        "description": product.description,
        "createdAt": product.created_at.isoformat(),
    }


def next_product_id(session: Session) -> int:
    # read-max-then-write; two concurrent adds can get the same id
    current_max = session.exec(select(func.max(Product.id))).one()
    return (current_max or 0) + 1


@router.post("/addproduct")
def add_product(
    product: ProductCreate,
    session: Session = Depends(get_session),
):
    db_product = Product(
        id=next_product_id(session),
        name=product.name,
        image=product.image,
        description=product.description,
    )

    session.add(db_product)
    session.commit()
    session.refresh(db_product)

    logger.info(f"Product {db_product.id} added: {db_product.name}")
    return {"success": True, "name": db_product.name, "product": product_public(db_product)}


@router.post("/removeproduct")
def remove_product(
    req: ProductRemove,
    session: Session = Depends(get_session),
):
    db_product = session.exec(select(Product).where(Product.id == req.id)).first()
    if db_product is None:
        logger.warning(f"removeproduct: no product with id {req.id}")
    else:
        session.delete(db_product)
        session.commit()
        logger.info(f"Product {req.id} removed")

    return {"success": True, "name": req.name}


@router.get("/allproducts")
def all_products(session: Session = Depends(get_session)):
    products = session.exec(select(Product).order_by(Product.pk)).all()
    return {"success": True, "products": [product_public(p) for p in products]}
