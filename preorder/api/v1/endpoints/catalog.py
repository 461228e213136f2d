"""Restaurant and menu item endpoints."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from preorder.api.v1.common import serialize_menu_item, serialize_restaurant
from preorder.db.session import get_db
from preorder.schemas.catalog import MenuItemCreate, MenuItemResponse, RestaurantCreate, RestaurantResponse
from preorder.services.catalog_service import create_menu_item, create_restaurant, list_menu_items, list_restaurants

router: APIRouter = APIRouter()


@router.get("/restaurants", response_model=list[RestaurantResponse])
def get_restaurants(db: Session = Depends(get_db)) -> list[RestaurantResponse]:
    """List restaurants in creation order."""
    return [serialize_restaurant(restaurant) for restaurant in list_restaurants(db)]


@router.post("/restaurants", response_model=RestaurantResponse, status_code=status.HTTP_201_CREATED)
def post_restaurant(payload: RestaurantCreate, db: Session = Depends(get_db)) -> RestaurantResponse:
    restaurant = create_restaurant(db, **payload.model_dump())
    return serialize_restaurant(restaurant)


@router.get("/menu-items/{restaurant_id}", response_model=list[MenuItemResponse])
def get_menu_items(restaurant_id: str, db: Session = Depends(get_db)) -> list[MenuItemResponse]:
    """List menu items of one restaurant."""
    return [serialize_menu_item(item) for item in list_menu_items(db, restaurant_id)]


@router.post("/menu-items", response_model=MenuItemResponse, status_code=status.HTTP_201_CREATED)
def post_menu_item(payload: MenuItemCreate, db: Session = Depends(get_db)) -> MenuItemResponse:
    item = create_menu_item(
        db,
        restaurant_id=payload.restaurant_id,
        name=payload.name,
        description=payload.description,
        price=payload.price,
        image_url=payload.image_url,
    )
    return serialize_menu_item(item)
