"""
Authentication context and role-based permissions.

The signed Flask session carries the logged-in user. Each request builds an
AuthContext from it; nothing about the user is kept in module state.
"""
from dataclasses import dataclass, field
from functools import wraps
from typing import Iterable, Optional, Set, Tuple

from flask import g, session

import logging

logger = logging.getLogger(__name__)

ROLES = ('admin', 'manager', 'sales', 'warehouse', 'viewer')

CRUD = ('create', 'read', 'update', 'delete')

# role -> set of (resource, action); '*' matches any resource
ROLE_PERMISSIONS = {
    'admin': {('*', action) for action in CRUD},
    'manager': (
        {(resource, action) for resource in ('leads', 'opportunities', 'quotes', 'invoices')
         for action in CRUD}
        | {('items', 'read'), ('items', 'update'),
           ('suppliers', 'read'), ('suppliers', 'create'), ('suppliers', 'update'),
           ('payments', 'create'), ('payments', 'read'),
           ('deliveries', 'create'), ('deliveries', 'read'), ('deliveries', 'update'),
           ('reports', 'read')}
    ),
    'sales': (
        {(resource, action) for resource in ('leads', 'opportunities', 'quotes')
         for action in ('create', 'read', 'update')}
        | {('invoices', 'read'), ('items', 'read'), ('deliveries', 'read')}
    ),
    'warehouse': {
        (resource, action) for resource in ('items', 'stock', 'deliveries')
        for action in ('create', 'read', 'update')
    } | {('suppliers', 'read')},
    'viewer': {
        (resource, 'read') for resource in
        ('leads', 'opportunities', 'quotes', 'invoices', 'items', 'deliveries')
    },
}

LOGIN_PAGE = '/login'
DASHBOARD_PAGE = '/dashboard'


@dataclass(frozen=True)
class AuthUser:
    id: str
    name: str
    role: str
    company_id: str
    email: Optional[str] = None


@dataclass(frozen=True)
class AuthContext:
    """Per-request view of who is calling."""
    is_authenticated: bool = False
    is_loading: bool = False
    user: Optional[AuthUser] = None
    permissions: Set[Tuple[str, str]] = field(default_factory=set)


def has_permission(role: str, resource: str, action: str) -> bool:
    """Check the role table, honouring the '*' wildcard"""
    permissions = ROLE_PERMISSIONS.get(role, set())
    return ('*', action) in permissions or (resource, action) in permissions


def check_permission(user: Optional[AuthUser], resource: str, action: str) -> bool:
    """Admin users have all permissions"""
    if user is None:
        return False
    if user.role == 'admin':
        return True
    return has_permission(user.role, resource, action)


def login_user(user: AuthUser):
    """Store user in a fresh session"""
    session.clear()
    session['user_id'] = user.id
    session['user_name'] = user.name
    session['user_role'] = user.role
    session['company_id'] = user.company_id
    if user.email:
        session['user_email'] = user.email
    logger.info(f"User logged in: {user.name} ({user.role})")


def logout_user():
    """Clear user session"""
    session.clear()


def get_auth_context() -> AuthContext:
    """Build the auth context for the current request from the session"""
    user_id = session.get('user_id')
    role = session.get('user_role')
    company_id = session.get('company_id')

    if not user_id or role not in ROLES or not company_id:
        return AuthContext()

    user = AuthUser(
        id=user_id,
        name=session.get('user_name', ''),
        role=role,
        company_id=company_id,
        email=session.get('user_email'),
    )
    return AuthContext(
        is_authenticated=True,
        user=user,
        permissions=set(ROLE_PERMISSIONS.get(role, set())),
    )


def resolve_guard_redirect(context: AuthContext, allowed_roles: Optional[Iterable[str]] = None) -> Optional[str]:
    """
    Decide where a page guard sends the caller.

    Returns:
        None to render the page (or wait, while loading), '/login' when not
        authenticated, '/dashboard' when the role is not allowed.
    """
    if context.is_loading:
        return None
    if not context.is_authenticated:
        return LOGIN_PAGE
    if allowed_roles is not None and context.user and context.user.role not in set(allowed_roles):
        return DASHBOARD_PAGE
    return None


def permission_required(resource: str, action: str):
    """
    Decorator for API routes: 401 envelope when logged out, 403 envelope when
    the role lacks the permission. The context is exposed as ``g.auth``.
    """
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            from app.utils.responses import unauthorized_response, forbidden_response

            context = get_auth_context()
            if not context.is_authenticated:
                return unauthorized_response()

            if not check_permission(context.user, resource, action):
                logger.warning(f"Permission denied: {context.user.role} {action} {resource}")
                return forbidden_response(f"You don't have permission to {action} {resource}")

            g.auth = context
            return f(*args, **kwargs)
        return decorated_function
    return decorator
