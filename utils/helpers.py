"""
Miscellaneous utility helper functions.
Formatting shared by templates, routes and the CLI.
"""

from datetime import datetime


def format_currency(amount, symbol: str = '$') -> str:
    """
    Format a monetary amount with two decimals.

    Args:
        amount: Number (None counts as zero)
        symbol: Currency symbol prefix

    Returns:
        Formatted amount, e.g. '$0.00' or '-$3.50'
    """
    value = float(amount or 0)
    sign = '-' if value < 0 else ''
    return f'{sign}{symbol}{abs(value):,.2f}'


def format_datetime(datetime_str, format_str: str = '%m/%d/%Y %H:%M') -> str:
    """
    Format datetime string for display.

    Args:
        datetime_str: Datetime string or datetime object
        format_str: Output format (default: MM/DD/YYYY HH:MM)

    Returns:
        Formatted datetime string or original if invalid
    """
    if not datetime_str:
        return ''

    if isinstance(datetime_str, datetime):
        return datetime_str.strftime(format_str)

    # Handle different input formats
    for input_format in ['%Y-%m-%d %H:%M:%S', '%Y-%m-%d %H:%M:%S.%f', '%Y-%m-%dT%H:%M:%S']:
        try:
            dt_obj = datetime.strptime(datetime_str, input_format)
            return dt_obj.strftime(format_str)
        except ValueError:
            continue

    return datetime_str


def parse_item_spec(spec: str) -> tuple:
    """
    Parse an order item given as 'DESCRIPTION:PRICE[:QTY]'.

    Args:
        spec: Item spec string, e.g. 'Latte:4.50:2'

    Returns:
        Tuple of (description, unit_price, quantity)

    Raises:
        ValueError if the item string is malformed
    """
    parts = [p.strip() for p in (spec or '').split(':')]

    if len(parts) == 2:
        description, price = parts
        quantity = '1'
    elif len(parts) == 3:
        description, price, quantity = parts
    else:
        raise ValueError(f'Invalid item "{spec}", expected DESCRIPTION:PRICE[:QTY]')

    if not description:
        raise ValueError(f'Invalid item "{spec}", description is required')

    try:
        return description, float(price), int(quantity)
    except ValueError:
        raise ValueError(f'Invalid item "{spec}", price and quantity must be numbers')
