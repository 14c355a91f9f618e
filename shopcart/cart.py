from fastapi import APIRouter, Depends, HTTPException, Request

from .schemas import CartAddRequest, CartOut, CartSummaryOut, CartUpdateRequest
from .store import CartStore

router = APIRouter(prefix="/api/cart", tags=["cart"])


def get_store(request: Request) -> CartStore:
    return request.app.state.cart_store


def valid_user_id(user_id: str) -> str:
    user_id = user_id.strip()
    if not user_id:
        raise HTTPException(status_code=400, detail="Invalid user ID")
    return user_id


@router.get("/{user_id}", response_model=CartOut)
async def get_cart(
    user_id: str = Depends(valid_user_id),
    store: CartStore = Depends(get_store),
):
    return CartOut.from_cart(store.get_cart(user_id))


@router.get("/{user_id}/summary", response_model=CartSummaryOut)
async def get_cart_summary(
    user_id: str = Depends(valid_user_id),
    store: CartStore = Depends(get_store),
):
    return CartSummaryOut.from_summary(store.get_cart_summary(user_id))


@router.post("/{user_id}/items", response_model=CartOut)
async def add_to_cart(
    payload: CartAddRequest,
    user_id: str = Depends(valid_user_id),
    store: CartStore = Depends(get_store),
):
    # ProductNotFound -> 404 via the CartError handler in main
    cart = await store.add_to_cart(user_id, payload.product_id, payload.quantity)
    return CartOut.from_cart(cart)


@router.put("/{user_id}/items/{product_id}", response_model=CartOut)
async def update_cart_item(
    product_id: str,
    payload: CartUpdateRequest,
    user_id: str = Depends(valid_user_id),
    store: CartStore = Depends(get_store),
):
    return CartOut.from_cart(store.update_cart_item(user_id, product_id, payload.quantity))


@router.delete("/{user_id}/items/{product_id}", response_model=CartOut)
async def remove_from_cart(
    product_id: str,
    user_id: str = Depends(valid_user_id),
    store: CartStore = Depends(get_store),
):
    return CartOut.from_cart(store.remove_from_cart(user_id, product_id))


@router.delete("/{user_id}", response_model=CartOut)
async def clear_cart(
    user_id: str = Depends(valid_user_id),
    store: CartStore = Depends(get_store),
):
    return CartOut.from_cart(store.clear_cart(user_id))


# An empty user id segment never reaches the "/{user_id}" routes above.
@router.api_route("/", methods=["GET", "DELETE"], include_in_schema=False)
@router.api_route("//summary", methods=["GET"], include_in_schema=False)
@router.api_route("//items", methods=["POST"], include_in_schema=False)
@router.api_route("//items/{product_id}", methods=["PUT", "DELETE"], include_in_schema=False)
async def missing_user_id():
    raise HTTPException(status_code=400, detail="Invalid user ID")
