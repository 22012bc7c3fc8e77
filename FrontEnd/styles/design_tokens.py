# Design tokens for Work Time Tracker UI

COLORS = {
    'background': '#F7F9FC',
    'surface': '#E7F0FF',
    'primary': '#5EA1FF',
    'primary_hover': '#4C92F5',
    'danger': '#E5484D',
    'danger_hover': '#CE3B40',
    'text': '#3C4450',
    'text_muted': '#7A8699',
    'text_strong': '#133A62',
    'border': '#DCE3ED',
    'sidebar_active_bg': '#E7F0FF',
    'sidebar_bg': '#F7F9FC',
    'card_bg': '#FFFFFF',
    'pause_dot': '#FFC24B',
}

FONTS = {
    'family': 'Inter, Manrope, Arial, sans-serif',
    'timer_size': 96,
    'button_size': 18,
    'sidebar_size': 16,
    'text': 16,
    'text_small': 13,
    'text_strong': 22,
}
