# aistudy/theme/tokens.py
TOKENS = {
    "radius": {"sm":8, "md":12, "lg":18, "xl":28},
    "spacing": {"xs":4, "sm":8, "md":12, "lg":16, "xl":20},
    "font": {"h1":24, "h2":18, "body":12, "kpi":26},
    "color": {
        "primary": "#6366F1",
        "primary_hover": "#4F46E5",
        "accent":  "#EC4899",
        "success": "#10B981",
        "warning": "#F59E0B",
        "danger":  "#EF4444",
        "muted":   "#94A3B8",
        "text":    "#E2E8F0",
        "surface": "#0F172A",
        "surface_alt": "#111C33",
        "card":   "#1E293B",
        "border":  "#334155",
        "grid":    "#334155",
    }
}

SUBJECT_COLORS = {
    "MATH": "#4F46E5",
    "LITERATURE": "#E11D48",
    "ENGLISH": "#0D9488",
    "INFORMATICS": "#7C3AED",
}
