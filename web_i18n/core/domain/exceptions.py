# web_i18n/core/domain/exceptions.py
class DomainError(Exception):
    """Base class for all domain-level exceptions."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)

# --- Input Errors ---

class UnsupportedLanguageError(DomainError):
    """Raised when a language code is not part of the supported bundles."""
    def __init__(self, lang_code: str):
        super().__init__(f"Language '{lang_code}' is not supported. Use one of: en, es.")

class ModuleLookupError(DomainError):
    """Raised when a module name does not exist in the active project."""
    def __init__(self, module_name: str, reason: str = "not found in the current project"):
        self.module_name = module_name
        super().__init__(f"Module '{module_name}' {reason}.")

# --- Collaborator Errors ---

class ServiceRegistryError(DomainError):
    """Raised by a service registry when the lookup itself fails."""
    def __init__(self, kind: str, reason: str):
        self.kind = kind
        super().__init__(f"Service lookup for '{kind}' failed: {reason}")

class ServiceUnavailableError(DomainError):
    """Raised when a collaborator is needed to run a command but cannot be resolved."""
    def __init__(self, kind: str):
        self.kind = kind
        super().__init__(f"Service '{kind}' is not available.")

class ProjectManifestError(DomainError):
    """Raised when the project manifest is missing, unreadable or invalid."""
    def __init__(self, path: str, details: str):
        self.path = path
        super().__init__(f"Invalid project manifest '{path}': {details}")
