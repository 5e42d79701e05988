"""Fully qualified names of the Filament and Laravel types that generated code uses."""

RESOURCE = "Filament\\Resources\\Resource"
# Filament 4.x moved form and infolist schemas to Filament\Schemas (3.x used Filament\Forms\Form).
SCHEMA = "Filament\\Schemas\\Schema"
TABLE = "Filament\\Tables\\Table"

ELOQUENT_BUILDER = "Illuminate\\Database\\Eloquent\\Builder"
SOFT_DELETING_SCOPE = "Illuminate\\Database\\Eloquent\\SoftDeletingScope"

# Broad namespaces imported when partial imports are enabled.
ACTIONS_NAMESPACE = "Filament\\Actions"
TABLES_NAMESPACE = "Filament\\Tables"
FORMS_NAMESPACE = "Filament\\Forms"
INFOLISTS_NAMESPACE = "Filament\\Infolists"

# Page base classes
LIST_RECORDS = "Filament\\Resources\\Pages\\ListRecords"
CREATE_RECORD = "Filament\\Resources\\Pages\\CreateRecord"
EDIT_RECORD = "Filament\\Resources\\Pages\\EditRecord"
VIEW_RECORD = "Filament\\Resources\\Pages\\ViewRecord"
MANAGE_RECORDS = "Filament\\Resources\\Pages\\ManageRecords"


def action(name: str) -> str:
    return f"{ACTIONS_NAMESPACE}\\{name}"


def form_component(name: str) -> str:
    return f"{FORMS_NAMESPACE}\\Components\\{name}"


def table_column(name: str) -> str:
    return f"{TABLES_NAMESPACE}\\Columns\\{name}"


def table_filter(name: str) -> str:
    return f"{TABLES_NAMESPACE}\\Filters\\{name}"
