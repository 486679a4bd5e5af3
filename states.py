"""Static FIPS reference data for states, DC, and territories.

The census district files identify a state only by its numeric FIPS code.
Codes outside this table are still aggregated; this table is used for
diagnostics only, so new codes never break a run.
"""

# ---------------------------------------------------------------------------
# State reference data
# ---------------------------------------------------------------------------
# Fields:
#   fips      – numeric FIPS state code, as it appears in columns 1-2
#   usps_code – 2-letter USPS postal code
#   name      – canonical full name (title case)
# ---------------------------------------------------------------------------

STATES: list[dict] = [
    {"fips": 1,  "usps_code": "AL", "name": "Alabama"},
    {"fips": 2,  "usps_code": "AK", "name": "Alaska"},
    {"fips": 4,  "usps_code": "AZ", "name": "Arizona"},
    {"fips": 5,  "usps_code": "AR", "name": "Arkansas"},
    {"fips": 6,  "usps_code": "CA", "name": "California"},
    {"fips": 8,  "usps_code": "CO", "name": "Colorado"},
    {"fips": 9,  "usps_code": "CT", "name": "Connecticut"},
    {"fips": 10, "usps_code": "DE", "name": "Delaware"},
    {"fips": 11, "usps_code": "DC", "name": "District of Columbia"},
    {"fips": 12, "usps_code": "FL", "name": "Florida"},
    {"fips": 13, "usps_code": "GA", "name": "Georgia"},
    {"fips": 15, "usps_code": "HI", "name": "Hawaii"},
    {"fips": 16, "usps_code": "ID", "name": "Idaho"},
    {"fips": 17, "usps_code": "IL", "name": "Illinois"},
    {"fips": 18, "usps_code": "IN", "name": "Indiana"},
    {"fips": 19, "usps_code": "IA", "name": "Iowa"},
    {"fips": 20, "usps_code": "KS", "name": "Kansas"},
    {"fips": 21, "usps_code": "KY", "name": "Kentucky"},
    {"fips": 22, "usps_code": "LA", "name": "Louisiana"},
    {"fips": 23, "usps_code": "ME", "name": "Maine"},
    {"fips": 24, "usps_code": "MD", "name": "Maryland"},
    {"fips": 25, "usps_code": "MA", "name": "Massachusetts"},
    {"fips": 26, "usps_code": "MI", "name": "Michigan"},
    {"fips": 27, "usps_code": "MN", "name": "Minnesota"},
    {"fips": 28, "usps_code": "MS", "name": "Mississippi"},
    {"fips": 29, "usps_code": "MO", "name": "Missouri"},
    {"fips": 30, "usps_code": "MT", "name": "Montana"},
    {"fips": 31, "usps_code": "NE", "name": "Nebraska"},
    {"fips": 32, "usps_code": "NV", "name": "Nevada"},
    {"fips": 33, "usps_code": "NH", "name": "New Hampshire"},
    {"fips": 34, "usps_code": "NJ", "name": "New Jersey"},
    {"fips": 35, "usps_code": "NM", "name": "New Mexico"},
    {"fips": 36, "usps_code": "NY", "name": "New York"},
    {"fips": 37, "usps_code": "NC", "name": "North Carolina"},
    {"fips": 38, "usps_code": "ND", "name": "North Dakota"},
    {"fips": 39, "usps_code": "OH", "name": "Ohio"},
    {"fips": 40, "usps_code": "OK", "name": "Oklahoma"},
    {"fips": 41, "usps_code": "OR", "name": "Oregon"},
    {"fips": 42, "usps_code": "PA", "name": "Pennsylvania"},
    {"fips": 44, "usps_code": "RI", "name": "Rhode Island"},
    {"fips": 45, "usps_code": "SC", "name": "South Carolina"},
    {"fips": 46, "usps_code": "SD", "name": "South Dakota"},
    {"fips": 47, "usps_code": "TN", "name": "Tennessee"},
    {"fips": 48, "usps_code": "TX", "name": "Texas"},
    {"fips": 49, "usps_code": "UT", "name": "Utah"},
    {"fips": 50, "usps_code": "VT", "name": "Vermont"},
    {"fips": 51, "usps_code": "VA", "name": "Virginia"},
    {"fips": 53, "usps_code": "WA", "name": "Washington"},
    {"fips": 54, "usps_code": "WV", "name": "West Virginia"},
    {"fips": 55, "usps_code": "WI", "name": "Wisconsin"},
    {"fips": 56, "usps_code": "WY", "name": "Wyoming"},
    # Territories
    {"fips": 60, "usps_code": "AS", "name": "American Samoa"},
    {"fips": 66, "usps_code": "GU", "name": "Guam"},
    {"fips": 69, "usps_code": "MP", "name": "Northern Mariana Islands"},
    {"fips": 72, "usps_code": "PR", "name": "Puerto Rico"},
    {"fips": 78, "usps_code": "VI", "name": "U.S. Virgin Islands"},
]

# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------

_BY_FIPS: dict[int, dict] = {s["fips"]: s for s in STATES}


def get_state_by_fips(code: int) -> dict | None:
    """Look up a state by numeric FIPS code."""
    return _BY_FIPS.get(code)
