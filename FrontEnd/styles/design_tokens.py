# Design tokens for the Lock-In Planner UI

COLORS = {
    'background': '#F7F9FC',
    'surface': '#FFFFFF',
    'primary': '#2F6FEB',
    'primary_hover': '#2458C2',
    'danger': '#D64545',
    'text': '#3C4450',
    'text_strong': '#133A62',
    'muted': '#7A8594',
    'border': '#DCE3ED',
    'sidebar_bg': '#F0F4FA',
    'footer_bg': '#E7F0FF',
    'footer_text': '#133A62',
    'phase_focus': '#2F6FEB',
    'phase_break': '#2EAD6B',
    'phase_idle': '#7A8594',
    'chart_bar': '#8FAEC4',
    'chart_edge': '#7B9BB0',
    'chart_grid': '#C9D8E2',
}

FONTS = {
    'family': 'Inter, Manrope, Arial, sans-serif',
    'timer_size': 72,
    'title_size': 20,
    'text': 14,
}

PHASE_TITLES = {
    'idle': 'Ready',
    'focus': 'Focus',
    'break': 'Break',
}
