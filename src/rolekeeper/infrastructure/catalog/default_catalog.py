"""Built-in catalog for the blog administration console."""

DEFAULT_CATALOG = {
    "groups": [
        {
            "name": "Content",
            "icon": "file-text",
            "permissions": [
                {"id": "posts.read", "label": "View Posts", "description": "Browse drafts and published posts"},
                {"id": "posts.write", "label": "Create & Edit Posts", "description": "Write new posts and edit existing ones"},
                {"id": "posts.publish", "label": "Publish Posts", "description": "Publish, schedule and unpublish posts"},
                {"id": "posts.delete", "label": "Delete Posts", "description": "Permanently remove posts"},
            ],
        },
        {
            "name": "Taxonomy",
            "icon": "tags",
            "permissions": [
                {"id": "categories.manage", "label": "Manage Categories", "description": "Create, rename and delete categories"},
                {"id": "tags.manage", "label": "Manage Tags", "description": "Create, rename and delete tags"},
            ],
        },
        {
            "name": "Users",
            "icon": "users",
            "permissions": [
                {"id": "users.read", "label": "View Users", "description": "See user accounts and their roles"},
                {"id": "users.write", "label": "Edit Users", "description": "Invite users and edit profiles"},
                {"id": "users.delete", "label": "Delete Users", "description": "Remove user accounts", "critical": True},
            ],
        },
        {
            "name": "Insights",
            "icon": "bar-chart",
            "permissions": [
                {"id": "analytics.view", "label": "View Analytics", "description": "Traffic and engagement dashboards"},
                {"id": "seo.manage", "label": "Manage SEO", "description": "Edit meta data and content scoring"},
            ],
        },
        {
            "name": "System Control",
            "icon": "shield",
            "permissions": [
                {"id": "audit.view", "label": "View Audit Log", "description": "Read the access-control activity log"},
                {"id": "settings.manage", "label": "Manage Settings", "description": "Change site-wide configuration", "critical": True},
                {
                    "id": "rbac.manage",
                    "label": "Manage Roles",
                    "description": "Create roles and edit permissions",
                    "critical": True,
                    "administrative": True,
                },
            ],
        },
    ],
    "dependencies": [
        {"permission": "posts.write", "requires": "posts.read", "message": "Editing posts requires viewing them"},
        {"permission": "posts.publish", "requires": "posts.write", "message": "Publishing requires edit access"},
        {"permission": "posts.delete", "requires": "posts.write", "message": "Deleting posts requires edit access"},
        {"permission": "categories.manage", "requires": "posts.read", "message": "Categories are managed alongside posts"},
        {"permission": "tags.manage", "requires": "posts.read", "message": "Tags are managed alongside posts"},
        {"permission": "users.write", "requires": "users.read", "message": "Editing users requires viewing them"},
        {"permission": "users.delete", "requires": "users.write", "message": "Deleting users requires edit access"},
        {"permission": "seo.manage", "requires": "analytics.view", "message": "SEO work relies on analytics"},
        {"permission": "settings.manage", "requires": "audit.view", "message": "Settings changes must be auditable"},
        {"permission": "rbac.manage", "requires": "audit.view", "message": "Role managers must see the audit log"},
        {"permission": "rbac.manage", "requires": "users.read", "message": "Role managers must see who holds a role"},
    ],
}
