"""
Centralized UI messages.
All user-facing text in one place for consistency.

Flash messages never interpolate customer names or emails: they show up on
the page a POST redirects to, next to other customers' data.
"""

MESSAGES = {
    # Success messages
    'customer_created': 'Customer created successfully',
    'customer_updated': 'Customer updated successfully',
    'customer_deleted': 'Customer removed',
    'order_created': 'Order #{order_id} created',

    # Error messages
    'customer_not_found': 'Customer not found',
    'customer_has_orders': 'A customer with orders cannot be removed',
    'name_required': 'Name is required',
    'email_required': 'Email is required',
    'invalid_email': 'Invalid email address',
    'name_too_long': 'Name must be at most {max} characters',
    'email_too_long': 'Email must be at most {max} characters',
    'invalid_price': 'Price must be a non-negative number',
    'invalid_quantity': 'Quantity must be a whole number of at least 1',
    'description_required': 'Item description is required',
    'invalid_item': 'Order items need a description and a price',
    'order_not_found': 'Order not found',
    'form_invalid': 'Please correct the errors below',

    # Page titles and headings
    'all_customers': 'All Customers',
    'new_customer': 'New Customer',
    'edit_customer': 'Edit Customer',
    'customer_details': 'Customer Details',
    'no_customers': 'No customers yet',
    'no_orders': 'No orders yet',
    'total_spent': 'Total spent',
}


def get_message(key: str, **kwargs) -> str:
    """
    Get message with optional formatting.

    Args:
        key: Message key
        **kwargs: Format parameters

    Returns:
        Formatted message or key if not found
    """
    message = MESSAGES.get(key, key)
    if kwargs:
        return message.format(**kwargs)
    return message
