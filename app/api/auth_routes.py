"""
Authentication Routes Blueprint

- /api/auth/register  - Create a company and its first (admin) user, then log in
- /api/auth/login     - Email + password login into the signed session
- /api/auth/logout    - Clear the session
- /api/auth/me        - Current user
- /api/auth/guard     - Where a page guard should send the caller
- /api/auth/users     - List and create users of the caller's company (admin)
"""

import logging
from flask import Blueprint, request, g

from auth import (
    AuthUser,
    DASHBOARD_PAGE,
    get_auth_context,
    login_user,
    logout_user,
    permission_required,
    resolve_guard_redirect,
)
from database import get_db_session
from database.models import generate_uuid
from services import UserRepository, DuplicateEmailError
from validators import validate_login_request, validate_user_request
from app.utils.responses import (
    success_response,
    error_response,
    unauthorized_response,
    not_found_response,
    validation_error_response,
    handle_api_error,
)

logger = logging.getLogger(__name__)

auth_bp = Blueprint('auth_bp', __name__)

INVALID_CREDENTIALS = "Invalid email or password"


def _json_body():
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else None


def _start_session(user):
    login_user(AuthUser(
        id=user['id'],
        name=user['name'],
        role=user['role'],
        company_id=user['companyId'],
        email=user['email'],
    ))


@auth_bp.route('/api/auth/register', methods=['POST'])
def register():
    data = _json_body()
    if data is None:
        return error_response("Request body must be a JSON object", 400)

    errors = validate_user_request(data, require_company=True)
    if errors:
        return validation_error_response(errors)

    try:
        with get_db_session() as db:
            user = UserRepository(db).create_user({
                'email': data['email'],
                'password': data['password'],
                'name': data['name'],
                'companyId': generate_uuid(),
                'companyName': data['companyName'],
                'role': 'admin',
            })
    except DuplicateEmailError:
        return error_response("User with this email already exists", 409)
    except Exception as e:
        return handle_api_error(e, "Registration failed")

    _start_session(user)
    return success_response({'user': user}, "Registration successful", 201)


@auth_bp.route('/api/auth/login', methods=['POST'])
def login():
    data = _json_body()
    if data is None:
        return error_response("Request body must be a JSON object", 400)

    errors = validate_login_request(data)
    if errors:
        return validation_error_response(errors)

    try:
        with get_db_session() as db:
            repository = UserRepository(db)
            account = repository.get_user_by_email(data['email'])
            if account is None or not repository.verify_password(account, data['password']):
                logger.warning(f"Failed login for {data['email']}")
                return unauthorized_response(INVALID_CREDENTIALS)
            if not account.is_active:
                return error_response("Account is inactive. Please contact your administrator.", 403)
            repository.update_last_login(account.id)
            user = account.to_dict()
    except Exception as e:
        return handle_api_error(e, "Login failed")

    _start_session(user)
    return success_response({'user': user, 'redirect': DASHBOARD_PAGE}, "Login successful")


@auth_bp.route('/api/auth/logout', methods=['POST'])
def logout():
    logout_user()
    return success_response(None, "Logged out successfully")


@auth_bp.route('/api/auth/me', methods=['GET'])
def me():
    context = get_auth_context()
    if not context.is_authenticated:
        return unauthorized_response()

    try:
        with get_db_session() as db:
            user = UserRepository(db).get_user(context.user.id)
    except Exception as e:
        return handle_api_error(e, "Failed to get user")

    if not user or not user['isActive']:
        logout_user()
        return not_found_response("User not found")
    return success_response({'user': user})


@auth_bp.route('/api/auth/guard', methods=['GET'])
def guard():
    """
    Page-guard decision for the frontend. ``roles`` is an optional
    comma-separated allow list; redirect is null when the page may render.
    """
    context = get_auth_context()
    roles = request.args.get('roles')
    allowed = [r.strip() for r in roles.split(',') if r.strip()] if roles is not None else None
    return success_response({
        'authenticated': context.is_authenticated,
        'redirect': resolve_guard_redirect(context, allowed),
    })


@auth_bp.route('/api/auth/users', methods=['GET'])
@permission_required('users', 'read')
def list_users():
    try:
        with get_db_session() as db:
            users = UserRepository(db, g.auth.user.company_id).list_users()
        return success_response({'users': users})
    except Exception as e:
        return handle_api_error(e, "Failed to get users")


@auth_bp.route('/api/auth/users', methods=['POST'])
@permission_required('users', 'create')
def create_user():
    data = _json_body()
    if data is None:
        return error_response("Request body must be a JSON object", 400)

    errors = validate_user_request(data)
    if errors:
        return validation_error_response(errors)

    try:
        with get_db_session() as db:
            user = UserRepository(db, g.auth.user.company_id).create_user({
                'email': data['email'],
                'password': data['password'],
                'name': data['name'],
                'role': data.get('role', 'viewer'),
                'companyName': _company_name(db, g.auth.user.id),
            })
        return success_response(user, "User created successfully", 201)
    except DuplicateEmailError:
        return error_response("User with this email already exists", 409)
    except Exception as e:
        return handle_api_error(e, "Failed to create user")


def _company_name(db, user_id):
    creator = UserRepository(db).get_user(user_id)
    return creator['companyName'] if creator else None
