"""Generic CRUD class that works with Pydantic schemas to eliminate boilerplate."""
from flask import jsonify, request
from shared.validation import ValidationError
from ..models import db
from ..utils import api_error, project_exists
from pydantic import ValidationError as PydanticValidationError
import logging
from typing import Optional, Callable, Any, Dict

# Columns never copied when duplicating a row
DUPLICATE_SKIP_COLUMNS = ('id', 'created_at', 'updated_at')


class GenericCRUD:
    """Generic CRUD class that automatically handles Pydantic validation and serialization.

    Equipment resources belong to a project through ``parent_field``; their
    list endpoint is scoped to one project and creation checks that the
    project exists.

    Usage:
        crud = GenericCRUD(
            model=Camera,
            create_schema=CameraCreate,
            update_schema=CameraUpdate,
            response_schema=CameraResponse,
            singular_name='camera',
        )
    """

    def __init__(
        self,
        model: type,
        create_schema: type,
        update_schema: type,
        response_schema: type,
        singular_name: Optional[str] = None,
        parent_field: Optional[str] = 'project_id',
        logger_name: Optional[str] = None,
        pre_create_hook: Optional[Callable[[Dict], Dict]] = None,
        duplicate_hook: Optional[Callable[[Dict], Dict]] = None,
    ):
        """Initialize generic CRUD class.

        Args:
            model: SQLAlchemy model class
            create_schema: Pydantic schema for creation (e.g., CameraCreate)
            update_schema: Pydantic schema for partial updates (e.g., CameraUpdate)
            response_schema: Pydantic schema for responses (e.g., CameraResponse)
            singular_name: Name used in messages (defaults to table name without trailing 's')
            parent_field: Foreign key to the owning project, or None for top-level resources
            logger_name: Optional logger name (defaults to model table name)
            pre_create_hook: Optional function run after validation, before creation.
                           Takes validated_data dict, returns modified dict.
            duplicate_hook: Optional function adjusting the copied column values
                          of a duplicate. Takes a dict, returns modified dict.
        """
        self.model = model
        self.create_schema = create_schema
        self.update_schema = update_schema
        self.response_schema = response_schema
        self.singular_name = singular_name
        self.parent_field = parent_field
        self.pre_create_hook = pre_create_hook
        self.duplicate_hook = duplicate_hook
        self.logger = logging.getLogger(logger_name or model.__tablename__)

    def get_list(self, parent_id=None):
        """Get all resources, scoped to a project when the resource has a parent.

        Args:
            parent_id: Owning project ID (required when parent_field is set)

        Returns:
            Flask JSON response with a list of resources ordered by ID
        """
        query = self.model.query
        if self.parent_field:
            if not project_exists(parent_id):
                return api_error('Project not found', 404)
            query = query.filter(getattr(self.model, self.parent_field) == parent_id)

        items = [self.serialize(item) for item in query.order_by(self.model.id).all()]
        return jsonify(items)

    def get_detail(self, resource_id):
        """Get single resource by ID."""
        resource = db.session.get(self.model, resource_id)
        if resource is None:
            return self.not_found()
        return jsonify(self.serialize(resource))

    def create(self):
        """Create a new resource with automatic Pydantic validation.

        Returns:
            Flask JSON response with the created resource and status 201
        """
        try:
            data = self.get_json_data()
            validated_data = self.validate_create_data(data)

            if self.parent_field and not project_exists(validated_data.get(self.parent_field)):
                return api_error('Project not found', 404)

            if self.pre_create_hook:
                validated_data = self.pre_create_hook(validated_data)

            resource = self.model(**validated_data)
            db.session.add(resource)
            db.session.commit()

            self.logger.info(f"Created {self.get_singular_name()}: {resource.id} - {self.describe(resource)}")
            return jsonify(self.serialize(resource)), 201

        except ValidationError as e:
            self.logger.warning(f"Validation error in {self.get_singular_name()} creation: {e}")
            return jsonify({'error': str(e)}), 400
        except Exception as e:
            self.logger.error(f"Failed to create {self.get_singular_name()}: {e}", exc_info=True)
            db.session.rollback()
            return jsonify({'error': f'Failed to create {self.get_singular_name()}'}), 500

    def update(self, resource_id):
        """Partially update an existing resource.

        Only the fields present in the request body are written; an explicit
        null clears an optional field.

        Returns:
            Flask JSON response with the updated resource
        """
        try:
            data = self.get_json_data()
            resource = db.session.get(self.model, resource_id)
            if resource is None:
                return self.not_found()

            validated_data = self.validate_update_data(data)

            for key, value in validated_data.items():
                setattr(resource, key, value)

            db.session.commit()

            self.logger.info(f"Updated {self.get_singular_name()} {resource_id}: {sorted(validated_data)}")
            return jsonify(self.serialize(resource))

        except ValidationError as e:
            self.logger.warning(f"Validation error in {self.get_singular_name()} update: {e}")
            return jsonify({'error': str(e)}), 400
        except Exception as e:
            self.logger.error(f"Failed to update {self.get_singular_name()}: {e}", exc_info=True)
            db.session.rollback()
            return jsonify({'error': f'Failed to update {self.get_singular_name()}'}), 500

    def delete(self, resource_id):
        """Delete a resource.

        Returns:
            Empty response with status 204
        """
        try:
            resource = db.session.get(self.model, resource_id)
            if resource is None:
                return self.not_found()

            db.session.delete(resource)
            db.session.commit()

            self.logger.info(f"Deleted {self.get_singular_name()}: {resource_id}")
            return '', 204
        except Exception as e:
            self.logger.error(f"Failed to delete {self.get_singular_name()}: {e}", exc_info=True)
            db.session.rollback()
            return jsonify({'error': f'Failed to delete {self.get_singular_name()}'}), 500

    def duplicate(self, resource_id):
        """Create a copy of an existing resource.

        Returns:
            Flask JSON response with the new resource and status 201
        """
        try:
            original = db.session.get(self.model, resource_id)
            if original is None:
                return self.not_found()

            values = {
                column.name: getattr(original, column.name)
                for column in self.model.__table__.columns
                if column.name not in DUPLICATE_SKIP_COLUMNS
            }
            if self.duplicate_hook:
                values = self.duplicate_hook(values)

            copy = self.model(**values)
            db.session.add(copy)
            db.session.commit()

            self.logger.info(f"Duplicated {self.get_singular_name()} {resource_id} as {copy.id}")
            return jsonify(self.serialize(copy)), 201
        except Exception as e:
            self.logger.error(f"Failed to duplicate {self.get_singular_name()}: {e}", exc_info=True)
            db.session.rollback()
            return jsonify({'error': f'Failed to duplicate {self.get_singular_name()}'}), 500

    def serialize(self, resource):
        """Serialize resource using Pydantic response schema."""
        return self.response_schema.model_validate(resource).model_dump(mode='json')

    def validate_create_data(self, data):
        """Validate data for creation using Pydantic schema.

        Raises:
            ValidationError: If validation fails
        """
        try:
            validated = self.create_schema(**data)
            return validated.model_dump(exclude_none=True)
        except PydanticValidationError as e:
            raise ValidationError(self.format_errors(e))

    def validate_update_data(self, data):
        """Validate data for a partial update using Pydantic schema.

        Raises:
            ValidationError: If validation fails or no known field is present
        """
        unknown = sorted(set(data) - set(self.update_schema.model_fields))
        if unknown:
            raise ValidationError(f"Unknown fields: {', '.join(unknown)}")
        try:
            validated = self.update_schema(**data)
            return validated.model_dump(exclude_unset=True)
        except PydanticValidationError as e:
            raise ValidationError(self.format_errors(e))

    @staticmethod
    def format_errors(error):
        errors = []
        for item in error.errors():
            field = '.'.join(str(x) for x in item['loc'])
            errors.append(f"{field}: {item['msg']}")
        return '; '.join(errors)

    def get_json_data(self):
        """Get and validate JSON data from request.

        Raises:
            ValidationError: If JSON is invalid or not a dict
        """
        data = request.get_json(silent=True)
        if data is None:
            raise ValidationError('Request body must contain valid JSON')
        if not isinstance(data, dict):
            raise ValidationError('Request data must be a JSON object')
        return data

    def not_found(self):
        return api_error(f'{self.get_singular_name().capitalize()} not found', 404)

    def describe(self, resource):
        return getattr(resource, 'location', getattr(resource, 'name', 'N/A'))

    def get_singular_name(self):
        """Get singular resource name for messages (e.g., 'project', 'camera')."""
        if self.singular_name:
            return self.singular_name
        table_name = self.model.__tablename__
        if table_name.endswith('s'):
            return table_name[:-1]
        return table_name


def register_crud_routes(bp, crud_instance, resource_path, parent_path='projects'):
    """Register standard CRUD routes for a blueprint.

    Args:
        bp: Flask Blueprint instance (url_prefix '/api')
        crud_instance: GenericCRUD instance
        resource_path: URL segment of the resource (e.g., 'access-points')
        parent_path: URL segment of the owning collection, used for the
                     scoped list route when the resource has a parent

    This function registers:
        GET    /api/{parent_path}/<parent_id>/{resource_path} - List (scoped resources)
        GET    /api/{resource_path}                           - List (top-level resources)
        GET    /api/{resource_path}/<id>                      - Get single resource
        POST   /api/{resource_path}                           - Create resource
        PUT    /api/{resource_path}/<id>                      - Update resource
        DELETE /api/{resource_path}/<id>                      - Delete resource
        POST   /api/{resource_path}/<id>/duplicate            - Duplicate resource
    """
    if crud_instance.parent_field:
        bp.add_url_rule(
            f'/{parent_path}/<int:parent_id>/{resource_path}', endpoint='list',
            view_func=lambda parent_id: crud_instance.get_list(parent_id), methods=['GET'])
    else:
        bp.add_url_rule(
            f'/{resource_path}', endpoint='list',
            view_func=lambda: crud_instance.get_list(), methods=['GET'])

    bp.add_url_rule(
        f'/{resource_path}/<int:resource_id>', endpoint='detail',
        view_func=crud_instance.get_detail, methods=['GET'])
    bp.add_url_rule(
        f'/{resource_path}', endpoint='create',
        view_func=crud_instance.create, methods=['POST'])
    bp.add_url_rule(
        f'/{resource_path}/<int:resource_id>', endpoint='update',
        view_func=crud_instance.update, methods=['PUT'])
    bp.add_url_rule(
        f'/{resource_path}/<int:resource_id>', endpoint='delete',
        view_func=crud_instance.delete, methods=['DELETE'])
    bp.add_url_rule(
        f'/{resource_path}/<int:resource_id>/duplicate', endpoint='duplicate',
        view_func=crud_instance.duplicate, methods=['POST'])
