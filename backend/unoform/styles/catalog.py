# backend/unoform/styles/catalog.py
"""
Style Catalog - The four Unoform kitchen styles

Each style carries its checklist rules, prompt vocabulary and
material allow-lists.
"""

from typing import Dict

from unoform.styles.registry import (
    MaterialCompatibility,
    RuleCategory,
    StyleDefinition,
    StyleRegistry,
    StyleValidation,
    StyleValidationRule,
)


# ============================================================
# CLASSIC
# ============================================================

CLASSIC_STYLE = StyleDefinition(
    id="classic",
    name="Classic",
    description=(
        "Cubic modules with horizontal slatted drawer fronts, thick wooden frames, "
        "and notably high dark recessed base creating strong shadow lines. Features "
        "uniform drawer units with handleless design and carved grip detail."
    ),
    validation=StyleValidation(
        must_have=[
            StyleValidationRule(
                category=RuleCategory.MUST_HAVE,
                description="Horizontal wood slats/strips on drawer fronts",
                keywords=["horizontal slats", "slatted", "wood strips", "parallel strips"],
                visual_markers=["horizontal lines", "striped pattern"],
            ),
            StyleValidationRule(
                category=RuleCategory.MUST_HAVE,
                description="Visible shadow gaps between each slat",
                keywords=["shadow gaps", "fine gaps", "dark lines", "shadow grooves"],
                visual_markers=["dark horizontal lines", "rhythm"],
            ),
            StyleValidationRule(
                category=RuleCategory.MUST_HAVE,
                description="Thick frame surrounding each drawer group",
                keywords=["thick frames", "wooden borders", "substantial frames"],
                visual_markers=["prominent borders", "module definition"],
            ),
            StyleValidationRule(
                category=RuleCategory.MUST_HAVE,
                description="High base/plinth creating shadow at floor",
                keywords=["high plinth", "floating base", "elevated", "shadow beneath"],
                visual_markers=["floor gap", "shadow line"],
            ),
            StyleValidationRule(
                category=RuleCategory.MUST_HAVE,
                description="Multiple identical drawers stacked (3-4 per module)",
                keywords=["stacked drawers", "three drawers", "four drawers", "identical height"],
                visual_markers=["repetition", "uniform spacing"],
            ),
            StyleValidationRule(
                category=RuleCategory.MUST_HAVE,
                description="No visible handles or hardware",
                keywords=["handleless", "integrated pulls", "no hardware", "clean fronts"],
                visual_markers=["smooth surfaces", "uninterrupted lines"],
            ),
        ],
        should_have=[
            StyleValidationRule(
                category=RuleCategory.SHOULD_HAVE,
                description="Clear module separation",
                keywords=["separate modules", "module gaps", "distinct units"],
                visual_markers=["vertical gaps", "individual units"],
            ),
            StyleValidationRule(
                category=RuleCategory.SHOULD_HAVE,
                description="Consistent slat alignment across modules",
                keywords=["aligned slats", "continuous lines", "matching pattern"],
                visual_markers=["horizontal continuity"],
            ),
            StyleValidationRule(
                category=RuleCategory.SHOULD_HAVE,
                description="Natural wood grain visible",
                keywords=["wood grain", "natural texture", "grain pattern"],
                visual_markers=["texture variation", "organic patterns"],
            ),
            StyleValidationRule(
                category=RuleCategory.SHOULD_HAVE,
                description="Dark/contrasting countertop",
                keywords=["dark stone", "black countertop", "contrasting surface"],
                visual_markers=["color contrast", "dark horizontal plane"],
            ),
        ],
        must_not_have=[
            StyleValidationRule(
                category=RuleCategory.MUST_NOT_HAVE,
                description="Visible handles or knobs",
                keywords=["handles", "knobs", "pulls", "hardware"],
                visual_markers=["protruding elements"],
            ),
            StyleValidationRule(
                category=RuleCategory.MUST_NOT_HAVE,
                description="Curved or rounded elements",
                keywords=["curved", "rounded", "arched", "organic shapes"],
                visual_markers=["curves", "non-linear elements"],
            ),
            StyleValidationRule(
                category=RuleCategory.MUST_NOT_HAVE,
                description="Drawer fronts without slats",
                keywords=["flat fronts", "smooth drawers", "plain surfaces"],
                visual_markers=["unbroken surfaces"],
            ),
            StyleValidationRule(
                category=RuleCategory.MUST_NOT_HAVE,
                description="Base that touches floor",
                keywords=["floor-mounted", "no gap", "grounded"],
                visual_markers=["no shadow line"],
            ),
        ],
    ),
    prompt_formula=(
        "Classic Unoform kitchen with horizontal slatted [material] drawer fronts, thin shadow "
        "gaps between each slat creating rhythmic pattern, thick [material] frames surrounding "
        "slatted drawer fronts, high recessed [color] base creating deep shadow at floor, "
        "[number] equal-height drawers stacked per cubic module, handleless design with routed "
        "grip carved into top edge, [worktop] countertop, professional architectural photography"
    ),
    primary_descriptors={
        "drawerFronts": [
            "horizontal slatted drawer fronts",
            "parallel wood strips with shadow gaps",
            "linear wood pattern",
            "striped texture with thin dark lines between slats",
        ],
        "shadows": [
            "fine shadow lines between each slat",
            "dark gaps creating rhythmic pattern",
            "shadow grooves between horizontal strips",
            "deep shadow beneath high plinth",
        ],
        "frames": [
            "thick wooden borders around slated fronts",
            "substantial frames enclosing drawer groups",
            "pronounced framing defining modules",
            "solid maple frames with finger joints",
        ],
        "base": [
            "notably high recessed plinth",
            "floating base effect with strong shadow",
            "elevated foundation creating floor gap",
            "dark recessed base about one-quarter drawer height",
        ],
        "hardware": [
            "handleless integrated pulls",
            "routed grip in top edge",
            "rabbeted design for tight seals",
            "soft-close mechanisms",
            "fully extendable drawers",
        ],
    },
    spatial_relationships=[
        "floating above floor on high plinth",
        "raised with deep shadow creating strong horizontal line",
        "hovering appearance with dark void beneath",
        "cubic modules aligned in row",
        "plinth height about quarter of drawer height",
    ],
    material_compatibility=MaterialCompatibility(
        woods=[
            "rich walnut with swirling grain",
            "honey oak with visible grain",
            "pale ash with subtle grain",
            "grey-brown smoked oak",
            "light beech wood",
            "natural maple",
        ],
        wood_descriptions={
            "walnut": "dark chocolate brown with swirling grain patterns",
            "oak": "golden honey-toned with straight grain",
            "ash": "pale blonde with subtle grain",
            "smoked oak": "grey-brown weathered appearance",
        },
        paints=["velvety matte white", "soft dove gray", "muted sage green", "deep charcoal", "midnight navy"],
        metals=["brushed stainless steel", "matte black powder coated"],
        countertops=[
            "black granite with subtle sparkle",
            "dark honed quartz",
            "white marble with grey veining",
            "polished concrete",
        ],
        color_palette=["natural wood tones", "maple", "smoked oak", "white ash", "walnut"],
    ),
)


# ============================================================
# COPENHAGEN
# ============================================================

COPENHAGEN_STYLE = StyleDefinition(
    id="copenhagen",
    name="Copenhagen",
    description=(
        "Based on Arne Munch's 1968 cubic furniture design. Features exposed wooden drawer "
        "boxes with no fronts, revealing interior construction and storage. Visible finger "
        "joints or dovetail joints at corners. Modules separated by wide gaps, mounted on "
        "slender legs or wall-mounted for floating appearance."
    ),
    validation=StyleValidation(
        must_have=[
            StyleValidationRule(
                category=RuleCategory.MUST_HAVE,
                description="Exposed drawer boxes (no fronts)",
                keywords=["exposed boxes", "open drawers", "no fronts", "visible interior"],
                visual_markers=["box construction", "interior visible"],
            ),
            StyleValidationRule(
                category=RuleCategory.MUST_HAVE,
                description="Visible interior construction",
                keywords=["visible construction", "exposed joints", "interior structure"],
                visual_markers=["joinery", "structural elements"],
            ),
            StyleValidationRule(
                category=RuleCategory.MUST_HAVE,
                description="Clear gaps between modules",
                keywords=["module gaps", "separate units", "spacing", "wide gaps"],
                visual_markers=["vertical spaces", "separation"],
            ),
            StyleValidationRule(
                category=RuleCategory.MUST_HAVE,
                description="Raised mounting (legs, wall, or low plinth)",
                keywords=["raised", "legs", "wall-mounted", "elevated"],
                visual_markers=["floor clearance", "mounting system"],
            ),
            StyleValidationRule(
                category=RuleCategory.MUST_HAVE,
                description="Natural wood interior visible",
                keywords=["natural wood", "wood interior", "unpainted inside"],
                visual_markers=["wood texture", "natural color"],
            ),
        ],
        should_have=[
            StyleValidationRule(
                category=RuleCategory.SHOULD_HAVE,
                description="Visible corner joints",
                keywords=["dovetail joints", "finger joints", "visible corners"],
                visual_markers=["decorative joinery"],
            ),
            StyleValidationRule(
                category=RuleCategory.SHOULD_HAVE,
                description="Metal or wood legs",
                keywords=["steel legs", "hairpin legs", "wooden legs", "slender supports"],
                visual_markers=["thin supports", "minimal base"],
            ),
            StyleValidationRule(
                category=RuleCategory.SHOULD_HAVE,
                description="Open, skeletal appearance",
                keywords=["skeletal", "minimal", "open structure", "lightweight"],
                visual_markers=["see-through", "airy"],
            ),
            StyleValidationRule(
                category=RuleCategory.SHOULD_HAVE,
                description="Organized interior visible",
                keywords=["organized", "neat interior", "visible storage"],
                visual_markers=["orderly contents"],
            ),
        ],
        must_not_have=[
            StyleValidationRule(
                category=RuleCategory.MUST_NOT_HAVE,
                description="Drawer fronts covering boxes",
                keywords=["drawer fronts", "covered boxes", "hidden interior"],
                visual_markers=["closed fronts"],
            ),
            StyleValidationRule(
                category=RuleCategory.MUST_NOT_HAVE,
                description="Continuous runs without gaps",
                keywords=["continuous", "no gaps", "connected modules"],
                visual_markers=["unbroken runs"],
            ),
            StyleValidationRule(
                category=RuleCategory.MUST_NOT_HAVE,
                description="Heavy, grounded appearance",
                keywords=["heavy", "grounded", "bulky", "solid base"],
                visual_markers=["massive appearance"],
            ),
        ],
    ),
    prompt_formula=(
        "Copenhagen Unoform kitchen with exposed [wood] drawer boxes showing interior "
        "construction, no drawer fronts revealing organized storage inside, visible [joint type] "
        "at corners aligned symmetrically, mounted on [mounting style], wide gaps between separate "
        "modules creating skeletal appearance, [lighting] highlighting natural wood interior, "
        "minimalist Danish design"
    ),
    primary_descriptors={
        "exposure": [
            "exposed wooden drawer boxes",
            "open drawer system showing contents",
            "visible interior construction",
            "skeletal minimalist structure",
        ],
        "construction": [
            "visible dovetail joints",
            "exposed finger joints at corners",
            "decorative joinery as design element",
            "aligned symmetrical joints regardless of drawer size",
        ],
        "support": [
            "slender brushed steel legs",
            "thin hairpin legs",
            "matching wood leg frames",
            "wall-mounted floating brackets",
            "furniture-like legs",
        ],
        "mounting": {
            "legs": "modules on thin metal or wood legs creating furniture appearance",
            "wall": "wall-mounted modules floating with clear space below",
            "plinth": "low plinth option for subtle elevation",
        },
        "gaps": [
            "wide gaps between modules",
            "clear module separation",
            "spacing about drawer-pull width",
            "individual units not continuous",
        ],
    },
    spatial_relationships=[
        "floating on slender legs about one drawer-height off floor",
        "wall-mounted with substantial clearance below",
        "raised creating airy appearance",
        "separate modules with gaps as wide as drawer pull",
        "furniture-like stance",
        "legs lift modules for easy cleaning beneath",
    ],
    material_compatibility=MaterialCompatibility(
        woods=[
            "white oak with visible grain",
            "pale ash wood",
            "light birch",
            "honey-toned beech",
            "nordic pine",
            "natural walnut",
        ],
        wood_descriptions={
            "oak": "light oak showing natural grain patterns",
            "ash": "white ash with straight subtle grain",
            "walnut": "rich walnut with prominent grain",
        },
        # natural wood finishes only
        paints=[],
        finishes=["natural wood with clear coat", "raw wood with oil finish", "matte varnish preserving texture"],
        metals=["matte black powder coated steel", "raw brushed steel", "aged brass", "stainless steel"],
        countertops=[
            "white Carrara marble",
            "light oak to match drawers",
            "polished concrete",
            "stainless steel",
            "travertine",
            "granite",
            "quartzite",
        ],
        color_palette=["natural wood finishes", "matte black accents", "neutral tones"],
    ),
)


# ============================================================
# SHAKER
# ============================================================

SHAKER_STYLE = StyleDefinition(
    id="shaker",
    name="Shaker",
    description=(
        "Nordic interpretation of American Shaker tradition. Features frame-and-panel doors "
        "with recessed flat center panels, simple clean lines without ornament. Painted in "
        "soft muted colors with small brass hardware. Mix of upper cabinets with doors and "
        "lower units with drawers."
    ),
    validation=StyleValidation(
        must_have=[
            StyleValidationRule(
                category=RuleCategory.MUST_HAVE,
                description="Frame-and-panel door construction",
                keywords=["frame-and-panel", "framed doors", "panel doors"],
                visual_markers=["visible frames", "recessed centers"],
            ),
            StyleValidationRule(
                category=RuleCategory.MUST_HAVE,
                description="Recessed center panel",
                keywords=["recessed panel", "inset panel", "sunken center"],
                visual_markers=["depth variation", "shadow lines"],
            ),
            StyleValidationRule(
                category=RuleCategory.MUST_HAVE,
                description="Simple, clean lines",
                keywords=["clean lines", "simple", "unadorned", "minimal detail"],
                visual_markers=["straight edges", "no ornamentation"],
            ),
            StyleValidationRule(
                category=RuleCategory.MUST_HAVE,
                description="Visible frame around panel",
                keywords=["visible frame", "door frame", "panel border"],
                visual_markers=["rectangular frames"],
            ),
            StyleValidationRule(
                category=RuleCategory.MUST_HAVE,
                description="Traditional proportions",
                keywords=["traditional", "classic proportions", "balanced"],
                visual_markers=["harmonious sizing"],
            ),
        ],
        should_have=[
            StyleValidationRule(
                category=RuleCategory.SHOULD_HAVE,
                description="Small brass or metal hardware",
                keywords=["brass knobs", "small pulls", "metal hardware"],
                visual_markers=["small hardware"],
            ),
            StyleValidationRule(
                category=RuleCategory.SHOULD_HAVE,
                description="Painted in muted colors",
                keywords=["muted colors", "soft tones", "painted finish"],
                visual_markers=["solid colors"],
            ),
            StyleValidationRule(
                category=RuleCategory.SHOULD_HAVE,
                description="Mix of doors and drawers",
                keywords=["doors and drawers", "mixed storage", "variety"],
                visual_markers=["different door types"],
            ),
            StyleValidationRule(
                category=RuleCategory.SHOULD_HAVE,
                description="Balanced, symmetrical layout",
                keywords=["symmetrical", "balanced", "orderly arrangement"],
                visual_markers=["visual balance"],
            ),
        ],
        must_not_have=[
            StyleValidationRule(
                category=RuleCategory.MUST_NOT_HAVE,
                description="Flat slab doors",
                keywords=["flat doors", "slab fronts", "no panels"],
                visual_markers=["unbroken surfaces"],
            ),
            StyleValidationRule(
                category=RuleCategory.MUST_NOT_HAVE,
                description="Ornate moldings",
                keywords=["ornate", "decorative molding", "complex profiles"],
                visual_markers=["excessive detail"],
            ),
            StyleValidationRule(
                category=RuleCategory.MUST_NOT_HAVE,
                description="High-gloss finishes",
                keywords=["high-gloss", "shiny", "reflective"],
                visual_markers=["glossy surfaces"],
            ),
            StyleValidationRule(
                category=RuleCategory.MUST_NOT_HAVE,
                description="Handleless design",
                keywords=["handleless", "no hardware", "push-to-open"],
                visual_markers=["no visible handles"],
            ),
        ],
    ),
    prompt_formula=(
        "Shaker style Unoform kitchen with frame-and-panel cabinet doors, recessed flat center "
        "panels within rectangular frames, painted in [color] with [finish], small [hardware type] "
        "hardware, clean simple lines without ornament, mix of upper cabinet doors and lower "
        "drawers, [Nordic/traditional] interpretation of American Shaker, calm traditional aesthetic"
    ),
    primary_descriptors={
        "doors": [
            "frame-and-panel construction",
            "recessed flat panel doors",
            "traditional panel within frame",
            "rectangular frame with inset center",
        ],
        "proportions": [
            "balanced traditional proportions",
            "harmonious cabinet sizing",
            "medium-width frames around panels",
            "classic American kitchen proportions",
        ],
        "hardware": [
            "small brass knobs",
            "delicate brass pulls",
            "understated traditional hardware",
            "brass handles adding elegance",
        ],
        "construction": {
            "doors": "framed doors with recessed panels reflecting Shaker traditions",
            "drawers": "standard birch plywood or optional solid maple",
            "features": "open shelving units for display and accessibility",
        },
        "frames": [
            "medium-width door frames",
            "visible frame around each panel",
            "not deeply recessed panels",
            "subtle shadow lines",
        ],
    },
    spatial_relationships=[
        "traditional plinth-mounted for grounded appearance",
        "sitting on standard base",
        "classic kitchen heights",
        "upper and lower cabinet arrangement",
        "balanced symmetrical layout",
    ],
    material_compatibility=MaterialCompatibility(
        woods=["painted birch plywood", "solid maple", "painted MDF for smooth finish"],
        paints=[
            "muted sage green",
            "soft dusty blue",
            "warm dove gray",
            "cream white",
            "putty beige",
            "Kieselgrau",
            "Anthracite Grey",
            "Olive",
        ],
        paint_finishes={
            "matte": "velvety non-reflective surface",
            "eggshell": "subtle sheen for durability",
            "satin": "gentle glow without high gloss",
        },
        metals=["warm brass", "antique pewter", "oil-rubbed bronze", "matte black"],
        countertops=["white Carrara marble", "maple butcher block", "grey soapstone", "honed granite"],
        color_palette=["Cream White", "Kieselgrau", "Anthracite Grey", "Olive", "soft Nordic tones"],
    ),
)


# ============================================================
# AVANTGARDE
# ============================================================

AVANTGARDE_STYLE = StyleDefinition(
    id="avantgarde",
    name="Avantgarde",
    description=(
        "Architectural minimalism with completely flat, seamless surfaces. Features flush "
        "cabinet fronts with hairline gaps creating geometric grid pattern. No visible hardware "
        "with push-to-open or integrated handles. Tall cabinets often reach ceiling height. "
        "Looks more like architecture than traditional kitchen."
    ),
    validation=StyleValidation(
        must_have=[
            StyleValidationRule(
                category=RuleCategory.MUST_HAVE,
                description="Completely flat, smooth surfaces",
                keywords=["flat surfaces", "smooth", "seamless", "uninterrupted"],
                visual_markers=["no texture", "perfect planes"],
            ),
            StyleValidationRule(
                category=RuleCategory.MUST_HAVE,
                description="Minimal gaps between all elements",
                keywords=["minimal gaps", "hairline gaps", "tiny spaces"],
                visual_markers=["fine lines", "precise gaps"],
            ),
            StyleValidationRule(
                category=RuleCategory.MUST_HAVE,
                description="No visible hardware",
                keywords=["no hardware", "handleless", "push-to-open"],
                visual_markers=["clean surfaces"],
            ),
            StyleValidationRule(
                category=RuleCategory.MUST_HAVE,
                description="Grid-like arrangement",
                keywords=["grid", "geometric", "regular pattern"],
                visual_markers=["geometric pattern"],
            ),
            StyleValidationRule(
                category=RuleCategory.MUST_HAVE,
                description="Architectural appearance",
                keywords=["architectural", "monolithic", "sculptural"],
                visual_markers=["building-like"],
            ),
        ],
        should_have=[
            StyleValidationRule(
                category=RuleCategory.SHOULD_HAVE,
                description="Floor-to-ceiling tall units",
                keywords=["floor-to-ceiling", "full-height", "tall cabinets"],
                visual_markers=["vertical emphasis"],
            ),
            StyleValidationRule(
                category=RuleCategory.SHOULD_HAVE,
                description="Uniform gap width throughout",
                keywords=["uniform gaps", "consistent spacing", "regular gaps"],
                visual_markers=["precision"],
            ),
            StyleValidationRule(
                category=RuleCategory.SHOULD_HAVE,
                description="Monochromatic color scheme",
                keywords=["monochromatic", "single color", "minimal variation"],
                visual_markers=["color unity"],
            ),
            StyleValidationRule(
                category=RuleCategory.SHOULD_HAVE,
                description="Premium material appearance",
                keywords=["premium", "luxury materials", "high-end finishes"],
                visual_markers=["quality surfaces"],
            ),
        ],
        must_not_have=[
            StyleValidationRule(
                category=RuleCategory.MUST_NOT_HAVE,
                description="Visible frames or borders",
                keywords=["frames", "borders", "trim", "edging"],
                visual_markers=["framing elements"],
            ),
            StyleValidationRule(
                category=RuleCategory.MUST_NOT_HAVE,
                description="Traditional elements",
                keywords=["traditional", "classic", "ornate", "decorative"],
                visual_markers=["classical details"],
            ),
            StyleValidationRule(
                category=RuleCategory.MUST_NOT_HAVE,
                description="Varied gap sizes",
                keywords=["varied gaps", "inconsistent spacing", "irregular"],
                visual_markers=["uneven spacing"],
            ),
        ],
    ),
    prompt_formula=(
        "Avantgarde Unoform kitchen with completely flat seamless [finish] surfaces, thin hairline "
        "gaps creating precise geometric grid pattern, no visible hardware or handles, [height] "
        "cabinets with monolithic appearance, push-to-open mechanisms, [color] minimalist finish, "
        "architectural presence like modern building, dramatic lighting emphasizing pure geometry"
    ),
    primary_descriptors={
        "surfaces": [
            "completely flat seamless surfaces",
            "uninterrupted smooth planes",
            "flawless facades without texture",
            "mirror-smooth expanses",
        ],
        "gaps": [
            "hairline gaps between elements",
            "precise uniform spacing",
            "geometric grid pattern",
            "minimal reveals creating rhythm",
            "gaps thin as credit card",
        ],
        "effect": [
            "architectural monolithic presence",
            "sculptural minimalist quality",
            "building-like appearance",
            "pure geometric forms",
        ],
        "hardware": {
            "type": "integrated handles or push-to-open mechanisms",
            "appearance": "no visible hardware maintaining clean lines",
            "options": ["touch-latch", "push-to-open", "integrated groove handles"],
        },
        "modules": {
            "tall": "floor-to-ceiling cabinets up to 240cm",
            "features": "pocket doors for appliance concealment",
            "arrangement": "flush fronts with minimal gaps creating grid",
        },
    },
    spatial_relationships=[
        "floor-to-ceiling vertical emphasis",
        "ground-hugging with minimal or no plinth",
        "wall-to-wall continuous surfaces",
        "floating elements with hidden mounting",
        "everything aligns to invisible grid",
        "gaps uniform throughout like architectural facade",
    ],
    material_compatibility=MaterialCompatibility(
        woods=["wood veneers in walnut or oak", "laminate surfaces"],
        finishes=["matte lacquer", "high-gloss lacquer", "anti-fingerprint coating"],
        paints=[
            "deep matte black",
            "pure glacier white",
            "concrete gray",
            "anthracite charcoal",
            "Cashmere Grey",
            "Verde Comodoro",
            "Blu Fes",
        ],
        paint_finishes={
            "matte": "completely non-reflective surface",
            "semi matte": "slight sheen for depth",
            "gloss": "mirror-like reflective surface",
        },
        metals=["integrated aluminum handles", "hidden steel mechanisms", "push-latch hardware"],
        countertops=[
            "ultra-thin porcelain slabs",
            "engineered quartz",
            "stainless steel",
            "polished concrete",
            "quartzite",
            "granite",
        ],
        color_palette=["Glacier White", "Cashmere Grey", "Verde Comodoro", "Blu Fes", "monochromatic schemes"],
    ),
)


# ============================================================
# CATALOG AGGREGATION
# ============================================================

STYLE_CATALOG = [
    CLASSIC_STYLE,
    COPENHAGEN_STYLE,
    SHAKER_STYLE,
    AVANTGARDE_STYLE,
]

UNOFORM_STYLES: Dict[str, StyleDefinition] = {style.id: style for style in STYLE_CATALOG}


def get_style(style_id: str) -> StyleDefinition:
    """Look up a style by id, raising KeyError for unknown ids"""
    return UNOFORM_STYLES[style_id]


def register_all_styles(registry: StyleRegistry) -> None:
    """Register all styles from the catalog"""
    for style in STYLE_CATALOG:
        registry.register(style)
    print(f"[STYLE REGISTRY] Registered {len(registry.styles)} styles: {list(registry.styles)}")
