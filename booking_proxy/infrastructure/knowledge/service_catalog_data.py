from __future__ import annotations

from booking_proxy.domain.entities.service_catalog import ServiceCatalogEntry

# Keep It Cut service names mapped to Meevo DEV service ids.
# Production locations need their own ids.
MENS_HAIRCUT_ID = "480b1fd6-1c42-4c8a-add3-a7600102a9b1"
WOMENS_HAIRCUT_ID = "54761597-e106-480a-898e-a76001002356"
CHILDRENS_HAIRCUT_ID = "d16c704b-3ff0-4d18-b73b-a7600102fdf1"
BLOW_OUT_ID = "978cbc02-048b-4d39-9f0d-a760010f32f8"
BEARD_TRIM_ID = "aff1ff92-15a6-4090-bf75-abf80103eebb"

ADDON_NOTE = "Optional add-on for any haircut"

SERVICE_CATALOG: tuple[ServiceCatalogEntry, ...] = (
    ServiceCatalogEntry(
        service_key="haircut_standard",
        service_id=MENS_HAIRCUT_ID,
        display_name="Haircut Standard",
        category="primary",
        aliases=frozenset({"haircut standard", "standard", "haircut"}),
        price="$26",
    ),
    # No skin fade service in the dev tenant, books as Men's Haircut
    ServiceCatalogEntry(
        service_key="haircut_skin_fade",
        service_id=MENS_HAIRCUT_ID,
        display_name="Haircut Skin Fade",
        category="primary",
        aliases=frozenset({"haircut skin fade", "skin_fade", "skin fade", "fade"}),
        price="$32",
    ),
    ServiceCatalogEntry(
        service_key="long_locks",
        service_id=WOMENS_HAIRCUT_ID,
        display_name="Long Locks",
        category="primary",
        aliases=frozenset({"long locks", "long"}),
        price="$60",
    ),
    ServiceCatalogEntry(
        service_key="wash",
        service_id=BLOW_OUT_ID,
        display_name="Wash",
        category="addon",
        aliases=frozenset({"shampoo"}),
        price="$6",
        notes=ADDON_NOTE,
    ),
    ServiceCatalogEntry(
        service_key="grooming",
        service_id=BEARD_TRIM_ID,
        display_name="Grooming",
        category="addon",
        aliases=frozenset({"beard", "beard_trim", "beard trim"}),
        price="$14",
        notes=ADDON_NOTE,
    ),
    ServiceCatalogEntry(
        service_key="mens_haircut",
        service_id=MENS_HAIRCUT_ID,
        display_name="Men's Haircut",
        category="legacy",
        aliases=frozenset({"mens haircut"}),
    ),
    ServiceCatalogEntry(
        service_key="womens_haircut",
        service_id=WOMENS_HAIRCUT_ID,
        display_name="Women's Haircut",
        category="legacy",
        aliases=frozenset({"womens haircut"}),
    ),
    ServiceCatalogEntry(
        service_key="childrens_haircut",
        service_id=CHILDRENS_HAIRCUT_ID,
        display_name="Children's Haircut",
        category="legacy",
        aliases=frozenset({"childrens haircut", "kids_haircut"}),
    ),
)
