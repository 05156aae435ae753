"""Lookup blueprint serving dropdown option lists."""
from flask import Blueprint, jsonify
from shared.lookup import LOOKUP_DATA

bp = Blueprint('lookup', __name__, url_prefix='/api')


@bp.route('/lookup', methods=['GET'])
def get_lookup():
    """Get all dropdown option lists."""
    return jsonify(LOOKUP_DATA)
