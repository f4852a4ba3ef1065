"""JSON shapes for API responses."""

from uuid import UUID

from rolekeeper.application.dto.role_dto import CommitPreview
from rolekeeper.domain.catalog import PermissionCatalog
from rolekeeper.domain.draft import DraftSession
from rolekeeper.domain.entities import (
    ActivityLogEntry,
    AssignmentRecord,
    DependencyEdge,
    PermissionGroup,
    Role,
)
from rolekeeper.domain.value_objects import PermissionChange


def role_to_dict(role: Role) -> dict:
    stamp = role.last_modified
    return {
        "id": str(role.id),
        "name": role.name,
        "description": role.description,
        "is_system": role.is_system,
        "color": role.color.value,
        "status": role.status.value,
        "permissions": dict(role.permissions),
        "user_count": role.user_count,
        "version": role.version,
        "last_modified": (
            {"actor": stamp.actor, "at": stamp.at.isoformat()} if stamp else None
        ),
    }


def group_to_dict(group: PermissionGroup) -> dict:
    return {
        "name": group.name,
        "icon": group.icon,
        "permissions": [
            {
                "id": p.id,
                "label": p.label,
                "description": p.description,
                "critical": p.critical,
                "administrative": p.administrative,
            }
            for p in group.permissions
        ],
    }


def edge_to_dict(edge: DependencyEdge) -> dict:
    return {"permission": edge.permission, "requires": edge.requires, "message": edge.message}


def catalog_to_dict(catalog: PermissionCatalog) -> dict:
    return {
        "groups": [group_to_dict(g) for g in catalog.groups],
        "dependencies": [edge_to_dict(e) for e in catalog.edges],
        "administrative": sorted(catalog.administrative_ids),
    }


def change_to_dict(change: PermissionChange) -> dict:
    return {"id": change.id, "label": change.label, "from": change.before, "to": change.after}


def draft_to_dict(draft_id: UUID, session: DraftSession) -> dict:
    return {
        "id": str(draft_id),
        "role_id": str(session.role_id),
        "role_name": session.role_name,
        "is_system": session.is_system,
        "base_version": session.base_version,
        "working_set": session.working,
        "is_dirty": session.is_dirty,
        "state": session.state.value,
        "pending_confirmation": session.pending_confirmation,
        "changes": [change_to_dict(c) for c in session.diff()],
    }


def preview_to_dict(preview: CommitPreview) -> dict:
    return {
        "role_id": str(preview.role_id),
        "role_name": preview.role_name,
        "changes": [change_to_dict(c) for c in preview.changes],
        "granted": preview.granted,
        "revoked": preview.revoked,
        "affected_users": preview.affected_users,
        "summary": preview.summary,
        "requires_preview": not preview.is_empty,
    }


def log_to_dict(entry: ActivityLogEntry) -> dict:
    return {
        "id": str(entry.id),
        "action": entry.action.value,
        "role_id": str(entry.role_id),
        "performed_by": entry.performed_by,
        "timestamp": entry.timestamp.isoformat(),
        "details": entry.details,
    }


def assignment_to_dict(record: AssignmentRecord) -> dict:
    return {
        "user_id": record.user_id,
        "role_id": str(record.role_id),
        "assigned_date": record.assigned_date.isoformat(),
    }
