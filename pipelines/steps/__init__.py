# Namespace for pipeline steps
from .collect_actors import CollectActors  # noqa: F401
from .resolve_profiles import ResolveProfiles  # noqa: F401
from .extract_companies import ExtractCompanies  # noqa: F401
