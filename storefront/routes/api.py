"""JSON API routes: catalog browsing and the session-scoped cart."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional
from uuid import uuid4

from flask import Blueprint, current_app, g, jsonify, request
from pydantic import ValidationError
from werkzeug.exceptions import HTTPException

from ..common.errors import MissingSessionError, StorefrontError
from ..common.schemas import AddCartItemRequest, UpdateCartItemRequest, format_validation_error
from ..common.services.logging import log_event


api_bp = Blueprint("storefront_api", __name__, url_prefix="/api")

logger = logging.getLogger(__name__)


def _components() -> Dict[str, Any]:
    return current_app.extensions["storefront_components"]


def _config():
    return current_app.config["STOREFRONT_CONFIG"]


def _cart_session(issue: bool = True) -> Optional[str]:
    """Session id from the cart cookie; a fresh one is issued when allowed."""
    session_id = request.cookies.get(_config().cookie_name)
    if session_id:
        return session_id
    if not issue:
        return None
    if "issued_cart_session" not in g:
        g.issued_cart_session = str(uuid4())
        log_event("info", "cart.session_issued", path=request.path)
    return g.issued_cart_session


@api_bp.after_request
def attach_cart_cookie(response):
    session_id = g.pop("issued_cart_session", None)
    if session_id:
        config = _config()
        response.set_cookie(
            config.cookie_name,
            session_id,
            max_age=config.cookie_max_age,
            httponly=True,
            secure=config.cookie_secure,
            samesite="Lax",
        )
    return response


# --- errors ---

@api_bp.errorhandler(StorefrontError)
def handle_storefront_error(exc: StorefrontError):
    return jsonify({"message": exc.message}), exc.status_code


@api_bp.app_errorhandler(HTTPException)
def handle_http_error(exc: HTTPException):
    return jsonify({"message": exc.description}), exc.code


@api_bp.errorhandler(Exception)
def handle_unexpected_error(exc: Exception):
    if isinstance(exc, HTTPException):
        return handle_http_error(exc)
    logger.exception("Unhandled error on %s %s", request.method, request.path)
    log_event("error", "request.failed", method=request.method, path=request.path, error=type(exc).__name__)
    return jsonify({"message": "Internal server error"}), 500


# --- catalog ---

@api_bp.get("/health")
def health():
    store = _components()["catalog_store"]
    return jsonify(
        {
            "status": "ok",
            "categories": len(store.get_categories()),
            "products": len(store.get_products()),
        }
    )


@api_bp.get("/categories")
def list_categories():
    return jsonify(_components()["catalog_service"].list_categories())


@api_bp.get("/products")
def list_products():
    service = _components()["catalog_service"]
    products = service.list_products(
        category=request.args.get("category"),
        filter_name=request.args.get("filter"),
    )
    return jsonify(products)


@api_bp.get("/products/<slug>")
def get_product(slug: str):
    return jsonify(_components()["catalog_service"].get_product(slug))


# --- cart ---

@api_bp.get("/cart")
def get_cart():
    service = _components()["cart_service"]
    return jsonify(service.get_cart(session_id=_cart_session()))


@api_bp.post("/cart")
def add_to_cart():
    payload = request.get_json(silent=True)
    try:
        item = AddCartItemRequest.model_validate(payload if payload is not None else {})
    except ValidationError as exc:
        return jsonify({"message": format_validation_error(exc)}), 400

    service = _components()["cart_service"]
    # an unknown product must not leave a fresh session cookie behind
    service.require_product(item.product_id)
    cart = service.add_item(session_id=_cart_session(), request=item)
    return jsonify(cart), 201


@api_bp.put("/cart/<int:item_id>")
def update_cart_item(item_id: int):
    payload = request.get_json(silent=True)
    try:
        update = UpdateCartItemRequest.model_validate(payload if payload is not None else {})
    except ValidationError:
        return jsonify({"message": "Invalid quantity"}), 400

    service = _components()["cart_service"]
    cart = service.update_item(session_id=_cart_session(issue=False), item_id=item_id, quantity=update.quantity)
    return jsonify(cart)


@api_bp.delete("/cart/<int:item_id>")
def remove_cart_item(item_id: int):
    service = _components()["cart_service"]
    cart = service.remove_item(session_id=_cart_session(issue=False), item_id=item_id)
    return jsonify(cart)


@api_bp.delete("/cart")
def clear_cart():
    session_id = _cart_session(issue=False)
    if not session_id:
        raise MissingSessionError("No cart session found")
    return jsonify(_components()["cart_service"].clear_cart(session_id=session_id))
