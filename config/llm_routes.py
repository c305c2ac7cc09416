from __future__ import annotations

import os


# Central routing for LLM use-cases. Edit here to change per-operation defaults.
# You can also override per-route model via env vars for quick testing.
#
# Keys are use_case identifiers consumed by services/llm_client.py
ROUTES: dict[str, dict] = {
    # Company names mentioned in a contributor's bio/company fields
    "company_extraction": {
        "model": os.getenv("OPENAI_MODEL_EXTRACTION"),  # falls back to global OPENAI_MODEL
        # Logical operation name for logging (not a vendor API name)
        "operation": "company_extraction",
    },
}
