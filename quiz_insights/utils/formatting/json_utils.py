"""JSON serialization utilities for storage documents (ObjectId, datetime)"""
from bson import ObjectId
from datetime import date, datetime
from typing import Any, Dict, List, Union

def serialize_document(obj: Any) -> Any:
    """Convert ObjectId and datetime objects to JSON serializable format"""
    if isinstance(obj, ObjectId):
        return str(obj)
    elif isinstance(obj, (datetime, date)):
        return obj.isoformat()
    elif isinstance(obj, dict):
        return {key: serialize_document(value) for key, value in obj.items()}
    elif isinstance(obj, (list, tuple)):
        return [serialize_document(item) for item in obj]
    return obj

def sanitize_document(doc: Union[Dict, List, None]) -> Union[Dict, List, None]:
    """Sanitize a report payload for JSON serialization"""
    if doc is None:
        return None
    return serialize_document(doc)
