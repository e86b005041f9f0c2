"""CLI output utilities and formatting."""

from colorama import Fore, Style

BANNER = f"""
{Fore.GREEN}{Style.BRIGHT}  groot{Style.RESET_ALL} {Fore.WHITE}- a tiny content-addressed version control system{Style.RESET_ALL}
"""


def success(message: str) -> str:
    """Format success message in green."""
    return f"{Fore.GREEN}✓ {message}{Style.RESET_ALL}"


def info(message: str) -> str:
    """Format info message in cyan."""
    return f"{Fore.CYAN}→ {message}{Style.RESET_ALL}"


def warning(message: str) -> str:
    """Format warning message in yellow."""
    return f"{Fore.YELLOW}⚠ {message}{Style.RESET_ALL}"


def error(message: str) -> str:
    """Format error message in red."""
    return f"{Fore.RED}✗ {message}{Style.RESET_ALL}"


def format_diff_parts(parts, color: bool = True) -> str:
    """
    Render diff parts line by line.
    
    Added lines are prefixed with ``++`` (green), removed lines with ``--``
    (red) and unchanged lines are shown dimmed.
    """
    output = []
    
    for part in parts:
        if part.kind == 'added':
            prefix, style = '++', Fore.GREEN
        elif part.kind == 'removed':
            prefix, style = '--', Fore.RED
        else:
            prefix, style = '', Style.DIM
        
        for line in part.text.splitlines():
            if color:
                output.append(f"{style}{prefix}{line}{Style.RESET_ALL}")
            else:
                output.append(f"{prefix}{line}")
    
    return '\n'.join(output)
