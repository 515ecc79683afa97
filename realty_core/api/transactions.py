"""Transaction CRUD endpoints.

Mounted at {api_prefix}/transaction:
- POST   /                      - Create transaction (auth)
- GET    /transactions          - List all transactions
- GET    /<transaction_id>      - Get single transaction
- PUT    /<transaction_id>      - Update name/type (auth)
- DELETE /<transaction_id>      - Delete transaction (auth)

Architecture Notes:
- Handlers are thin: validate shape, make one store call, serialize
- Reads populate the user reference; serialization redacts it
- updateDate is set at creation only
"""

import logging
from datetime import datetime, UTC

from flask import Blueprint, g, jsonify

from ..auth.decorators import auth_required
from ..db import get_store
from ..exceptions import ResourceNotFound, ValidationError
from ..schemas import TRANSACTION_RULES, UPDATE_RULES, TransactionRecord, validate
from ..utils import isodatetime, uid
from .validation import json_object

logger = logging.getLogger(__name__)

transactions_bp = Blueprint("transactions", __name__)


def _not_found(transaction_id: str) -> ResourceNotFound:
    return ResourceNotFound(
        f"Transaction '{transaction_id}' not found",
        {"transaction_id": transaction_id}
    )


def _check_id(transaction_id: str) -> None:
    # Ids are always store-generated UUIDs; anything else cannot exist
    if not uid.is_uuid(transaction_id):
        raise _not_found(transaction_id)


@transactions_bp.post("/")
@auth_required
def create_transaction():
    """
    Create a new transaction owned by the caller.

    Request Body:
        - name: str (required, non-empty)
        - type: str (required, non-empty)
        - status: str (required, non-empty)

    Returns:
        201: Serialized transaction
        400: Validation error
        401: Missing or invalid token
    """
    body = json_object()
    new_transaction = {
        "user": g.user_id,
        "name": body.get("name"),
        "type": body.get("type"),
        "status": body.get("status"),
        "createDate": datetime.now(UTC),
    }

    result = validate(new_transaction, TRANSACTION_RULES)
    if not result.ok:
        raise ValidationError("Invalid transaction data", result.as_details())

    record = TransactionRecord.from_document({
        **new_transaction,
        "createDate": isodatetime.coerce(new_transaction["createDate"]),
    })
    document = get_store().transactions.create(record.to_document())
    logger.info(f"Transaction {document['id']} created by user {g.user_id}")

    return jsonify(TransactionRecord.from_document(document).serialize()), 201


@transactions_bp.get("/transactions")
def list_transactions():
    """
    List every transaction with its user expanded.

    Returns:
        200: Array of serialized transactions
    """
    documents = get_store().transactions.find(populate=("user",))
    return jsonify([
        TransactionRecord.from_document(document).serialize()
        for document in documents
    ])


@transactions_bp.get("/<transaction_id>")
def get_transaction(transaction_id: str):
    """
    Get a single transaction by ID with its user expanded.

    Returns:
        200: Serialized transaction
        404: Transaction not found
    """
    _check_id(transaction_id)
    document = get_store().transactions.find_by_id(transaction_id, populate=("user",))
    if document is None:
        raise _not_found(transaction_id)

    return jsonify(TransactionRecord.from_document(document).serialize())


@transactions_bp.put("/<transaction_id>")
@auth_required
def update_transaction(transaction_id: str):
    """
    Update a transaction's name and/or type.

    Other fields cannot be changed through this endpoint and updateDate
    is left as is.

    Request Body:
        - name: str (optional, non-empty)
        - type: str (optional, non-empty)
        At least one of them must be present.

    Returns:
        204: Updated
        400: Validation error
        401: Missing or invalid token
        404: Transaction not found
    """
    body = json_object()
    transaction_update = {
        field: body[field]
        for field in UPDATE_RULES.fields
        if body.get(field) is not None
    }

    result = validate(transaction_update, UPDATE_RULES)
    if not result.ok:
        raise ValidationError("Invalid transaction data", result.as_details())
    if not transaction_update:
        raise ValidationError(
            "No updatable fields provided",
            {"accepted": list(UPDATE_RULES.fields)}
        )

    _check_id(transaction_id)
    updated = get_store().transactions.find_by_id_and_update(transaction_id, transaction_update)
    if updated is None:
        raise _not_found(transaction_id)

    logger.info(f"Transaction {transaction_id} updated by user {g.user_id}")
    return "", 204


@transactions_bp.delete("/<transaction_id>")
@auth_required
def delete_transaction(transaction_id: str):
    """
    Delete a transaction permanently.

    Returns:
        204: Deleted
        401: Missing or invalid token
        404: Transaction not found
    """
    _check_id(transaction_id)
    deleted = get_store().transactions.find_by_id_and_delete(transaction_id)
    if deleted is None:
        raise _not_found(transaction_id)

    logger.info(f"Transaction {transaction_id} deleted by user {g.user_id}")
    return "", 204
