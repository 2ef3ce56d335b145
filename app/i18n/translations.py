"""Dashboard translations."""

EN = {
    "common": {
        "add": "Add",
        "edit": "Edit",
        "delete": "Delete",
        "cancel": "Cancel",
        "save": "Save",
        "update": "Update",
        "close": "Close",
        "search": "Search",
        "actions": "Actions",
        "details": "Details",
        "confirm": "Confirm",
        "loading": "Loading...",
        "noData": "No data available",
        "error": "Error",
        "success": "Success",
        "language": "Language",
    },
    "navigation": {
        "home": "Home",
        "members": "Members",
        "users": "Users",
        "sponsors": "Sponsors",
        "payments": "Payments",
        "roles": "Roles",
        "permissions": "Permissions",
        "properties": "Properties",
        "activities": "Activities",
    },
    "auth": {
        "login": "Sign in",
        "loginTitle": "Sign in to your club",
        "register": "Create account",
        "registerTitle": "Register your club",
        "logout": "Sign out",
        "email": "Email",
        "password": "Password",
        "name": "Name",
        "clubName": "Club name",
        "noAccount": "Don't have an account?",
        "haveAccount": "Already have an account?",
        "verifying": "Verifying authentication...",
    },
    "home": {
        "title": "Dashboard",
        "subtitle": "Overview of your club",
        "club": "Club",
        "editClub": "Edit club",
        "clubForm": {
            "name": "Name",
            "location": "Location",
            "description": "Description",
        },
        "stats": {
            "totalMembers": "Total members",
            "totalUsers": "Total users",
            "totalSponsors": "Total sponsors",
            "totalPayments": "Total payments",
        },
    },
    "members": {
        "title": "Members",
        "subtitle": "Manage the members of your club",
        "addMember": "Add member",
        "form": {"name": "Name", "email": "Email"},
        "table": {"name": "Name", "email": "Email", "createdAt": "Created"},
        "messages": {
            "deleteConfirm": "Delete this member?",
            "deleteSuccess": "Member deleted",
            "addSuccess": "Member added",
            "updateSuccess": "Member updated",
        },
    },
    "users": {
        "title": "Users",
        "subtitle": "Manage the accounts with access to the dashboard",
        "addUser": "Add user",
        "form": {"name": "Name", "email": "Email", "password": "Password"},
        "table": {"name": "Name", "email": "Email", "createdAt": "Created", "updatedAt": "Updated"},
        "messages": {
            "deleteConfirm": "Delete this user?",
            "deleteSuccess": "User deleted",
            "addSuccess": "User added",
            "updateSuccess": "User updated",
        },
    },
    "sponsors": {
        "title": "Sponsors",
        "subtitle": "Companies and people supporting your club",
        "addSponsor": "Add sponsor",
        "form": {"name": "Name", "email": "Email"},
        "table": {"name": "Name", "email": "Email", "createdAt": "Created"},
        "messages": {
            "deleteConfirm": "Delete this sponsor?",
            "deleteSuccess": "Sponsor deleted",
            "addSuccess": "Sponsor added",
            "updateSuccess": "Sponsor updated",
        },
    },
    "payments": {
        "title": "Payments",
        "subtitle": "Income and expenses of your club",
        "addPayment": "Add payment",
        "form": {
            "amount": "Amount",
            "type": "Type",
            "category": "Category",
            "description": "Description",
            "date": "Date",
        },
        "table": {
            "amount": "Amount",
            "type": "Type",
            "category": "Category",
            "description": "Description",
            "date": "Date",
        },
        "types": {"INCOME": "Income", "EXPENSE": "Expense"},
        "messages": {
            "deleteConfirm": "Delete this payment?",
            "deleteSuccess": "Payment deleted",
            "addSuccess": "Payment added",
            "updateSuccess": "Payment updated",
        },
    },
    "roles": {
        "title": "Roles",
        "subtitle": "Roles available in your club",
        "addRole": "Add role",
        "form": {"name": "Name", "permission_ids": "Permission IDs (comma separated)"},
        "table": {"name": "Name"},
        "messages": {
            "deleteConfirm": "Delete this role?",
            "deleteSuccess": "Role deleted",
            "addSuccess": "Role added",
            "updateSuccess": "Role updated",
        },
    },
    "permissions": {
        "title": "Permissions",
        "subtitle": "Permissions that can be granted to roles",
        "addPermission": "Add permission",
        "form": {"name": "Name", "description": "Description"},
        "table": {"name": "Name", "description": "Description"},
        "messages": {
            "deleteConfirm": "Delete this permission?",
            "deleteSuccess": "Permission deleted",
            "addSuccess": "Permission added",
            "updateSuccess": "Permission updated",
        },
    },
    "properties": {
        "title": "Properties",
        "subtitle": "Facilities owned or used by your club",
        "addProperty": "Add property",
        "form": {
            "name": "Name",
            "location": "Location",
            "characteristics": "Characteristics (comma separated)",
        },
        "table": {"name": "Name", "location": "Location", "characteristics": "Characteristics"},
        "messages": {
            "deleteConfirm": "Delete this property?",
            "deleteSuccess": "Property deleted",
            "addSuccess": "Property added",
            "updateSuccess": "Property updated",
        },
    },
    "activities": {
        "title": "Activities",
        "subtitle": "Activities organised by your club",
        "addActivity": "Add activity",
        "form": {"name": "Name", "description": "Description"},
        "table": {"name": "Name", "description": "Description"},
        "messages": {
            "deleteConfirm": "Delete this activity?",
            "deleteSuccess": "Activity deleted",
            "addSuccess": "Activity added",
            "updateSuccess": "Activity updated",
        },
    },
    "errors": {
        "generic": "Something went wrong",
        "backendUnavailable": "The server is not available",
        "sessionExpired": "Your session has expired, please sign in again",
        "invalidForm": "Please check the form fields",
    },
}

ES = {
    "common": {
        "add": "Agregar",
        "edit": "Editar",
        "delete": "Eliminar",
        "cancel": "Cancelar",
        "save": "Guardar",
        "update": "Actualizar",
        "close": "Cerrar",
        "search": "Buscar",
        "actions": "Acciones",
        "details": "Detalles",
        "confirm": "Confirmar",
        "loading": "Cargando...",
        "noData": "No hay datos disponibles",
        "error": "Error",
        "success": "Éxito",
        "language": "Idioma",
    },
    "navigation": {
        "home": "Inicio",
        "members": "Miembros",
        "users": "Usuarios",
        "sponsors": "Sponsors",
        "payments": "Pagos",
        "roles": "Roles",
        "permissions": "Permisos",
        "properties": "Propiedades",
        "activities": "Actividades",
    },
    "auth": {
        "login": "Iniciar sesión",
        "loginTitle": "Accede a tu club",
        "register": "Crear cuenta",
        "registerTitle": "Registra tu club",
        "logout": "Cerrar sesión",
        "email": "Email",
        "password": "Contraseña",
        "name": "Nombre",
        "clubName": "Nombre del club",
        "noAccount": "¿No tienes cuenta?",
        "haveAccount": "¿Ya tienes cuenta?",
        "verifying": "Verificando autenticación...",
    },
    "home": {
        "title": "Panel",
        "subtitle": "Resumen de tu club",
        "club": "Club",
        "editClub": "Editar club",
        "clubForm": {
            "name": "Nombre",
            "location": "Ubicación",
            "description": "Descripción",
        },
        "stats": {
            "totalMembers": "Total de miembros",
            "totalUsers": "Total de usuarios",
            "totalSponsors": "Total de sponsors",
            "totalPayments": "Total de pagos",
        },
    },
    "members": {
        "title": "Miembros",
        "subtitle": "Gestiona los miembros de tu club",
        "addMember": "Agregar miembro",
        "form": {"name": "Nombre", "email": "Email"},
        "table": {"name": "Nombre", "email": "Email", "createdAt": "Creado"},
        "messages": {
            "deleteConfirm": "¿Eliminar este miembro?",
            "deleteSuccess": "Miembro eliminado",
            "addSuccess": "Miembro agregado",
            "updateSuccess": "Miembro actualizado",
        },
    },
    "users": {
        "title": "Usuarios",
        "subtitle": "Gestiona las cuentas con acceso al panel",
        "addUser": "Agregar usuario",
        "form": {"name": "Nombre", "email": "Email", "password": "Contraseña"},
        "table": {"name": "Nombre", "email": "Email", "createdAt": "Creado", "updatedAt": "Actualizado"},
        "messages": {
            "deleteConfirm": "¿Eliminar este usuario?",
            "deleteSuccess": "Usuario eliminado",
            "addSuccess": "Usuario agregado",
            "updateSuccess": "Usuario actualizado",
        },
    },
    "sponsors": {
        "title": "Sponsors",
        "subtitle": "Empresas y personas que apoyan a tu club",
        "addSponsor": "Agregar sponsor",
        "form": {"name": "Nombre", "email": "Email"},
        "table": {"name": "Nombre", "email": "Email", "createdAt": "Creado"},
        "messages": {
            "deleteConfirm": "¿Eliminar este sponsor?",
            "deleteSuccess": "Sponsor eliminado",
            "addSuccess": "Sponsor agregado",
            "updateSuccess": "Sponsor actualizado",
        },
    },
    "payments": {
        "title": "Pagos",
        "subtitle": "Ingresos y gastos de tu club",
        "addPayment": "Agregar pago",
        "form": {
            "amount": "Monto",
            "type": "Tipo",
            "category": "Categoría",
            "description": "Descripción",
            "date": "Fecha",
        },
        "table": {
            "amount": "Monto",
            "type": "Tipo",
            "category": "Categoría",
            "description": "Descripción",
            "date": "Fecha",
        },
        "types": {"INCOME": "Ingreso", "EXPENSE": "Gasto"},
        "messages": {
            "deleteConfirm": "¿Eliminar este pago?",
            "deleteSuccess": "Pago eliminado",
            "addSuccess": "Pago agregado",
            "updateSuccess": "Pago actualizado",
        },
    },
    "roles": {
        "title": "Roles",
        "subtitle": "Roles disponibles en tu club",
        "addRole": "Agregar rol",
        "form": {"name": "Nombre", "permission_ids": "IDs de permisos (separados por comas)"},
        "table": {"name": "Nombre"},
        "messages": {
            "deleteConfirm": "¿Eliminar este rol?",
            "deleteSuccess": "Rol eliminado",
            "addSuccess": "Rol agregado",
            "updateSuccess": "Rol actualizado",
        },
    },
    "permissions": {
        "title": "Permisos",
        "subtitle": "Permisos que se pueden asignar a los roles",
        "addPermission": "Agregar permiso",
        "form": {"name": "Nombre", "description": "Descripción"},
        "table": {"name": "Nombre", "description": "Descripción"},
        "messages": {
            "deleteConfirm": "¿Eliminar este permiso?",
            "deleteSuccess": "Permiso eliminado",
            "addSuccess": "Permiso agregado",
            "updateSuccess": "Permiso actualizado",
        },
    },
    "properties": {
        "title": "Propiedades",
        "subtitle": "Instalaciones que posee o usa tu club",
        "addProperty": "Agregar propiedad",
        "form": {
            "name": "Nombre",
            "location": "Ubicación",
            "characteristics": "Características (separadas por comas)",
        },
        "table": {"name": "Nombre", "location": "Ubicación", "characteristics": "Características"},
        "messages": {
            "deleteConfirm": "¿Eliminar esta propiedad?",
            "deleteSuccess": "Propiedad eliminada",
            "addSuccess": "Propiedad agregada",
            "updateSuccess": "Propiedad actualizada",
        },
    },
    "activities": {
        "title": "Actividades",
        "subtitle": "Actividades organizadas por tu club",
        "addActivity": "Agregar actividad",
        "form": {"name": "Nombre", "description": "Descripción"},
        "table": {"name": "Nombre", "description": "Descripción"},
        "messages": {
            "deleteConfirm": "¿Eliminar esta actividad?",
            "deleteSuccess": "Actividad eliminada",
            "addSuccess": "Actividad agregada",
            "updateSuccess": "Actividad actualizada",
        },
    },
    "errors": {
        "generic": "Algo salió mal",
        "backendUnavailable": "El servidor no está disponible",
        "sessionExpired": "Tu sesión ha expirado, inicia sesión de nuevo",
        "invalidForm": "Revisa los campos del formulario",
    },
}

TRANSLATIONS = {"en": EN, "es": ES}
