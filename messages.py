MESSAGES = {
    "en": {
        # Authentication
        "invalid_credentials": "Invalid username or password",
        "account_deactivated": "Your account has been deactivated. Please contact an administrator.",
        "login_required": "Please log in to access this page",
        "logged_out": "You have been logged out",
        "api_key_required": "API key required",
        "api_key_required_detail": "Please provide an API key in the X-API-Key header or api_key query parameter",
        "invalid_api_key": "Invalid API key",
        "invalid_api_key_detail": "The provided API key is not valid",

        # Authorization
        "forbidden": "You do not have permission to access this resource",
        "insufficient_permissions": "Insufficient permissions",
        "insufficient_permissions_detail": "This API key does not have the required permissions",
        "permission_denied": "You do not have permission to perform this action",
        "self_modification": "You cannot change your own role, status or account",
        "api_key_over_scoped": "API key permissions exceed your role",

        # Lookups
        "not_found": "The requested resource was not found",
        "user_not_found": "User not found",
        "key_not_found": "Translation key not found",
        "language_not_found": "Language not found",
        "translation_not_found": "Translation not found",
        "api_key_not_found": "API key not found",

        # Conflicts
        "conflict": "The record conflicts with an existing one",
        "key_exists": "Key already exists or invalid data",
        "language_exists": "Language code already exists or invalid data",
        "user_exists": "Username or email already exists",
        "already_approved": "Translation is already approved",

        # Validation
        "invalid_request": "The request could not be processed",
        "key_required": "Key is required",
        "value_required": "Value is required",
        "language_fields_required": "Code and name are required",
        "name_required": "Name is required",
        "user_fields_required": "All fields are required",
        "invalid_role": "Unknown role",
        "permissions_required": "Select at least one permission",
        "invalid_permission": "Unknown permission",

        # Success
        "key_created": "Translation key created successfully",
        "key_deleted": "Translation key deleted",
        "translation_saved": "Translation saved successfully",
        "translation_approved": "Translation approved",
        "api_key_created": "API key created successfully",
        "api_key_deleted": "API key deleted",
        "language_created": "Language created successfully",
        "language_updated": "Language updated successfully",
        "language_deleted": "Language deleted",
        "user_created": "User created successfully",
        "user_updated": "User updated successfully",
        "user_role_updated": "User role updated",
        "user_activated": "User activated successfully",
        "user_deactivated": "User deactivated successfully",
        "user_deleted": "User deleted",
    },
    "de": {
        "invalid_credentials": "Ungültiger Benutzername oder ungültiges Passwort",
        "account_deactivated": "Ihr Konto wurde deaktiviert. Bitte wenden Sie sich an einen Administrator.",
        "login_required": "Bitte melden Sie sich an, um diese Seite aufzurufen",
        "logged_out": "Sie wurden abgemeldet",
        "api_key_required": "API-Schlüssel erforderlich",
        "invalid_api_key": "Ungültiger API-Schlüssel",

        "forbidden": "Sie haben keine Berechtigung für diese Ressource",
        "insufficient_permissions": "Unzureichende Berechtigungen",
        "permission_denied": "Sie haben keine Berechtigung für diese Aktion",
        "self_modification": "Sie können Ihre eigene Rolle, Ihren Status oder Ihr Konto nicht ändern",
        "api_key_over_scoped": "Die Berechtigungen des API-Schlüssels übersteigen Ihre Rolle",

        "user_not_found": "Benutzer nicht gefunden",
        "key_not_found": "Übersetzungsschlüssel nicht gefunden",
        "language_not_found": "Sprache nicht gefunden",
        "translation_not_found": "Übersetzung nicht gefunden",

        "key_exists": "Schlüssel existiert bereits oder ungültige Daten",
        "language_exists": "Sprachcode existiert bereits oder ungültige Daten",
        "user_exists": "Benutzername oder E-Mail existiert bereits",
        "already_approved": "Übersetzung ist bereits freigegeben",

        "key_required": "Schlüssel ist erforderlich",
        "value_required": "Wert ist erforderlich",
        "user_fields_required": "Alle Felder sind erforderlich",
        "invalid_role": "Unbekannte Rolle",
        "permissions_required": "Wählen Sie mindestens eine Berechtigung",

        "key_created": "Übersetzungsschlüssel erfolgreich erstellt",
        "key_deleted": "Übersetzungsschlüssel gelöscht",
        "translation_saved": "Übersetzung erfolgreich gespeichert",
        "translation_approved": "Übersetzung freigegeben",
        "api_key_created": "API-Schlüssel erfolgreich erstellt",
        "api_key_deleted": "API-Schlüssel gelöscht",
        "language_created": "Sprache erfolgreich erstellt",
        "language_updated": "Sprache erfolgreich aktualisiert",
        "language_deleted": "Sprache gelöscht",
        "user_created": "Benutzer erfolgreich erstellt",
        "user_updated": "Benutzer erfolgreich aktualisiert",
        "user_role_updated": "Benutzerrolle aktualisiert",
        "user_activated": "Benutzer erfolgreich aktiviert",
        "user_deactivated": "Benutzer erfolgreich deaktiviert",
        "user_deleted": "Benutzer gelöscht",
    },
}


def get_translator(lang="en"):
    """Return a message lookup function for the given language."""
    strings = MESSAGES.get(lang, MESSAGES["en"])
    fallback = MESSAGES["en"]

    def t(key, **kwargs):
        text = strings.get(key, fallback.get(key, key))
        if kwargs:
            text = text.format(**kwargs)
        return text

    return t
