from store_collections import CARTS


def delete_cart(db, user_id: str) -> None:
    db.collection(CARTS).document(user_id).delete()
