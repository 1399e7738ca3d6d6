"""Static name tables for joining boundary features to result rows.

These are data, not logic: spellings collected by comparing the boundary
dataset against the results dataset.  Extend the tables when a new boundary
release introduces another variant; keys are cleaned boundary names
(lower-cased, reservation annotation removed), values are cleaned result names.
"""

from collections.abc import Mapping
from types import MappingProxyType

ALIASES_VERSION = "2021.1"

NAME_ALIASES: Mapping[str, str] = MappingProxyType(
    {
        "gummidipoondi": "gummidipundi",
        "tiruvottiyur": "thiruvottiyur",
        "arakkonam": "arakonam",
        "sholingur": "sholinghur",
        "dr.radhakrishnan naga": "dr. radhakrishnan nagar",
        "gudiyattam": "gudiyatham",
        "chepauk-thiruvalliken": "chepauk-thiruvallikeni",
        "thiyagarayanagar": "theayagaraya nagar",
        "vaniyambadi": "vaniayambadi",
        "madurantakam": "maduranthakam",
        "palacodu": "palacode",
        "rishivandiyam": "rishivandiam",
        "viluppuram": "villupuram",
        "ulundurpettai": "ulundurpet",
        "edappadi": "edapadi",
        "tiruchengodu": "tiruchengode",
        "senthamangalam": "sendamangalam",
        "mettuppalayam": "mettupalayam",
        "sirkazhi": "sirkali",
        "modakkurichi": "modakurichi",
        "thiruvidaimarudur": "thiruvidamarudur",
        "coimbatore(north)": "coimbatore north",
        "coimbatore(south)": "coimbatore south",
        "udumalaipettai": "udumalpet",
        "thiruverumbur": "thiruverambur",
        "orathanadu": "orathanad",
        "thiruthuraipoondi": "thiruthuraipundi",
        "nilakkottai": "nilakottai",
        "aranthangi": "arantangi",
        "aruppukkottai": "aruppukottai",
        "mudhukulathur": "mudukulathur",
        "palayamkottai": "palayamcottai",
    }
)

# Boundary features sharing one base name, told apart by their numeric identifier.
SPLIT_CONSTITUENCIES: Mapping[str, Mapping[int, str]] = MappingProxyType(
    {
        "tiruchirappalli": MappingProxyType(
            {
                140: "tiruchirapalli (west)",
                141: "tiruchirapalli (east)",
            }
        ),
    }
)
