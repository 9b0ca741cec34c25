"""
Prompt vocabulary tables shared by the prompt builder and the validator.
"""

STYLE_PROMPT_TEMPLATES = {
    "classic": {
        "basic": (
            "Classic Unoform kitchen with horizontal slatted {wood} drawer fronts, thick wooden frames, "
            "high dark recessed base, handleless carved grip design, warm natural {wood} with visible grain, "
            "soft morning light from left, Danish minimalist heritage design"
        ),
        "detailed": (
            "Classic Unoform kitchen featuring horizontal slatted {wood} drawer fronts with thin shadow gaps "
            "between each slat, thick {wood} frames surrounding each drawer module, notably high {color} "
            "recessed plinth creating deep shadow at floor, {number} equal-height drawers stacked in cubic "
            "modules, handleless design with routed finger grip carved into top edge, {countertop} countertop "
            "providing contrast, bright Scandinavian daylight, professional architectural photography"
        ),
    },
    "copenhagen": {
        "basic": (
            "Copenhagen Unoform kitchen with exposed wooden drawer boxes, no fronts showing interior "
            "construction, visible dovetail joints, mounted on thin brushed steel legs, floating appearance "
            "with shadow underneath, bright Scandinavian daylight"
        ),
        "detailed": (
            "Copenhagen Unoform kitchen based on Arne Munch design, exposed {wood} drawer boxes with no fronts "
            "revealing organized interior, visible {jointType} joints aligned symmetrically at corners, mounted "
            "on {mounting}, wide gaps between separate modules creating skeletal appearance, natural {wood} "
            "interior with clear finish, {lighting}, minimalist Danish furniture aesthetic"
        ),
    },
    "shaker": {
        "basic": (
            "Shaker style Unoform kitchen, frame and panel cabinet doors, painted in muted sage green, small "
            "brass knob hardware, traditional yet minimal Nordic style, soft diffused lighting"
        ),
        "detailed": (
            "Shaker style Unoform kitchen with frame-and-panel construction, {color} painted cabinet doors with "
            "recessed flat center panels, {hardware} hardware adding traditional touch, mix of upper cabinets "
            "with doors and lower drawer units, Nordic interpretation of American Shaker simplicity, "
            "{countertop} countertops, warm inviting atmosphere with soft natural light"
        ),
    },
    "avantgarde": {
        "basic": (
            "Avantgarde Unoform kitchen with flat seamless surfaces, no visible handles or hardware, thin "
            "geometric gaps between elements, matte charcoal grey finish, floor to ceiling tall cabinets, "
            "dramatic architectural lighting"
        ),
        "detailed": (
            "Avantgarde Unoform kitchen with completely flat {finish} surfaces creating monolithic appearance, "
            "hairline gaps forming precise geometric grid, no visible hardware using push-to-open mechanisms, "
            "{height} cabinets in {color} finish, integrated appliances behind pocket doors, {countertop} "
            "worktop with minimal thickness, dramatic directional lighting emphasizing pure architectural form"
        ),
    },
}

LIGHTING_ATMOSPHERE = {
    "natural": {
        "morning": "soft morning light filtering through windows",
        "nordic": "bright Nordic daylight illuminating surfaces",
        "diffused": "diffused natural light creating soft shadows",
        "golden": "warm golden hour light",
    },
    "artificial": {
        "ambient": "warm ambient lighting throughout",
        "undercabinet": "subtle under-cabinet LED glow",
        "dramatic": "dramatic spotlighting emphasizing texture",
        "architectural": "architectural lighting highlighting forms",
    },
    "atmosphere": {
        "minimal": "pared-down essential minimalist atmosphere",
        "warm": "inviting cozy welcoming ambiance",
        "sophisticated": "refined elegant upscale environment",
        "modern": "contemporary fresh modern aesthetic",
    },
}

# Used when a mood value has no curated entry above
FALLBACK_LIGHTING = {
    "natural": "bright Nordic daylight illuminating surfaces",
    "ambient": "warm ambient lighting throughout",
    "dramatic": "dramatic spotlighting emphasizing texture",
    "even": "even professional lighting",
}

FALLBACK_ATMOSPHERE = {
    "minimalist": "pared-down essential minimalist atmosphere",
    "warm": "inviting cozy welcoming ambiance",
    "sophisticated": "refined elegant upscale environment",
    "modern": "contemporary fresh modern aesthetic",
}

TIME_OF_DAY = {
    "morning": "soft morning light filtering through windows",
    "afternoon": "bright Nordic afternoon illumination",
    "evening": "warm golden hour glow",
}

MATERIAL_DESCRIPTIONS = {
    "woods": {
        "oak": "honey-golden oak with prominent straight grain",
        "ash": "pale blonde ash with subtle grain pattern",
        "walnut": "rich chocolate walnut with swirling grain",
        "smoked oak": "grey-brown smoked oak with weathered appearance",
        "maple": "light maple with fine consistent grain",
        "birch": "creamy birch with delicate grain",
    },
    "finishes": {
        "matte": "velvety matte surface with no reflection",
        "satin": "subtle satin sheen with gentle glow",
        "natural": "natural wood finish showing texture",
        "lacquer": "smooth lacquered surface",
        "oiled": "hand-rubbed oil finish enhancing grain",
    },
    "metals": {
        "brass": "warm golden brass with subtle patina",
        "steel": "brushed stainless steel with fine texture",
        "black": "matte black powder-coated metal",
        "bronze": "oil-rubbed bronze with dark warmth",
    },
}

# Style-defining features appended to the features layer when missing
CRITICAL_STYLE_FEATURES = {
    "classic": ["horizontal slatted drawer fronts", "thick frames surrounding drawers", "high recessed plinth"],
    "copenhagen": ["exposed drawer boxes", "visible corner joints", "wide gaps between modules"],
    "shaker": ["frame-and-panel doors", "recessed center panels", "small hardware"],
    "avantgarde": ["completely flat surfaces", "hairline gaps", "no visible handles"],
}

# primary_descriptors categories consulted, in order, for default features
DEFAULT_FEATURE_PRIORITIES = {
    "classic": ["drawerFronts", "shadows", "frames", "base"],
    "copenhagen": ["exposure", "construction", "gaps", "support"],
    "shaker": ["doors", "frames", "hardware", "proportions"],
    "avantgarde": ["surfaces", "gaps", "effect", "hardware"],
}

STRUCTURE_PRESERVATION_PHRASES = [
    "maintaining kitchen layout",
    "preserving cabinet arrangement",
    "keeping spatial configuration",
]

CREATIVITY_ENHANCERS = [
    "professional interior photography",
    "architectural digest quality",
    "high-end kitchen showroom",
]

BRAND_REINFORCEMENTS = [
    "Danish kitchen design excellence",
    "Scandinavian craftsmanship",
    "Nordic design philosophy",
    "Unoform signature quality",
]

QUICK_TIPS = {
    "classic": [
        "Look for horizontal lines on drawer fronts",
        "Check for shadow gap under cabinets",
        "Ensure no handles are visible",
    ],
    "copenhagen": [
        "Interior of drawers should be visible",
        "Look for gaps between cabinet modules",
        "Check for visible joinery at corners",
    ],
    "shaker": [
        "Look for recessed panel in doors",
        "Check for visible frame around panels",
        "Ensure hardware is small and simple",
    ],
    "avantgarde": [
        "Surfaces should be completely flat",
        "Look for precise grid pattern",
        "Ensure no hardware is visible",
    ],
}
