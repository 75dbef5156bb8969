# scout/query_builder.py
# Prompt + strict JSON schema for one funding-stage category. No I/O.

from __future__ import annotations

from typing import Any, Dict

from scout.models import H1B_LEVELS

REGIONAL_INSTRUCTION = """
STRICTLY focus only on companies that have open or recent PRODUCT ROLES (Product Manager, Product Analyst, etc.)
specifically located in New York (NY), Pennsylvania (PA), New Jersey (NJ), or Delaware (DE).
The COMPANY itself does not need to be headquartered there, but the ROLES identified must be based in one of
these four states (Office-based or Hybrid in-region).
""".strip()

NATIONAL_INSTRUCTION = "Focus on USA-based companies generally."

# ------------------------- JSON schema ----------------------------

def company_list_schema() -> Dict[str, Any]:
    properties = {
        "name":     {"type": "string", "description": "Company Name"},
        "series":   {"type": "string", "description": "Funding Series (e.g. Series C)"},
        "industry": {"type": "string", "description": "Primary Industry"},
        "location": {
            "type": "string",
            "description": "Role Location (City, State) - Must be in NY, PA, NJ, or DE if requested",
        },
        "h1b_likelihood": {
            "type": "string",
            "enum": list(H1B_LEVELS),
            "description": "Estimated likelihood of H1B sponsorship",
        },
        "roles": {
            "type": "array",
            "items": {"type": "string"},
            "description": "Relevant product roles currently or recently open in the specified area",
        },
        "website":     {"type": "string", "description": "Company website URL"},
        "description": {"type": "string", "description": "Short description"},
        "reasoning": {
            "type": "string",
            "description": "Brief reason why they fit (e.g. Active product hub in NY)",
        },
    }
    return {
        "type": "array",
        "items": {
            "type": "object",
            "properties": properties,
            "required": ["name", "series", "industry", "h1b_likelihood", "roles", "location"],
        },
    }


def response_format(schema: Dict[str, Any]) -> Dict[str, Any]:
    """
    Structured outputs need an object at the root, so the company array is
    carried under a single "companies" key. strict stays off because
    website/description/reasoning are optional.
    """
    return {
        "type": "json_schema",
        "name": "CompanyList",
        "strict": False,
        "schema": {
            "type": "object",
            "properties": {"companies": schema},
            "required": ["companies"],
        },
    }

# ---------------------- Prompt builder ----------------------------

def build_prompt(series_label: str, regional_only: bool = False) -> str:
    region = REGIONAL_INSTRUCTION if regional_only else NATIONAL_INSTRUCTION
    return f"""
Find a COMPREHENSIVE list of at least 60 unique, active, and high-growth startup companies that have recently raised a {series_label} round of funding (between 2023 and 2025).

{region}

Focus specifically on companies that:
1. Are in high-growth sectors (AI, Fintech, Healthtech, SaaS, Enterprise Software).
2. Are actively hiring or have recently hired for Product Manager, Product Analyst, Growth Product Manager, or Growth Analyst roles.
3. Are known to be H1B friendly or generally hire international talent (large enough to sponsor).

Use web search to verify their recent funding status, specific JOB LOCATIONS for product roles, and activity.

Return the data as a JSON array. Ensure the 'location' field reflects the city and state where the PRODUCT ROLES are based (e.g., 'New York, NY' or 'Philadelphia, PA').

Because I need a large volume of data (50+ items), please be thorough and include as many valid entries as possible that meet these specific criteria.
""".strip()


def build_request(series_label: str, regional_only: bool = False) -> Dict[str, Any]:
    return {
        "prompt": build_prompt(series_label, regional_only),
        "schema": company_list_schema(),
    }
