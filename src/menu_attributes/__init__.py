"""Menu attributes settings package.

- **settings_form**: the administrative settings form (render and submit)
- **attributes**: attribute definitions and the built-in registry
- **schema**: typed form-schema tree produced by the form
- **config_store**: named configuration objects (YAML file and in-memory backends)
- **forms**: routing of submissions by form id
- **cli** / **gui**: command line and NiceGUI hosts

The main entry point is ``MenuAttributesSettingsForm``.
"""

from .config_store import MemoryConfigStore, YamlConfigStore
from .forms import FormRegistry
from .permissions import ADMINISTER_MENU_ATTRIBUTES, User
from .settings_form import CONFIG_NAME, FORM_ID, MenuAttributesSettingsForm
from .version import __version__

__all__ = [
    "__version__",
    "ADMINISTER_MENU_ATTRIBUTES",
    "CONFIG_NAME",
    "FORM_ID",
    "FormRegistry",
    "MemoryConfigStore",
    "MenuAttributesSettingsForm",
    "User",
    "YamlConfigStore",
]
