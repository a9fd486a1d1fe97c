"""CLI commands for the ShoppingCart aggregate and checkout."""

from __future__ import annotations

import click

from shopcart.application.dto import CartItemSpec, OrderDTO
from shopcart.application.show_cart import ShowCartHandler
from shopcart.domain.exceptions import DomainException
from shopcart.domain.model.cart import CartItem, ShoppingCart
from shopcart.domain.model.product import Category, Product
from shopcart.domain.model.value_objects import Address
from shopcart.infrastructure.bootstrap import checkout_handler, discount_policy, new_cart


def _parse_items(raw_items: tuple[str, ...]) -> list[CartItemSpec]:
    """Parse 'Laptop:1200:2:electronics' values into CartItemSpec list."""
    specs: list[CartItemSpec] = []
    for raw in raw_items:
        parts = [part.strip() for part in raw.split(":")]
        if len(parts) not in (3, 4):
            raise click.BadParameter(
                f"Invalid item format '{raw}'. Expected 'Name:Price:Qty[:Category]'."
            )
        name, price, qty_str = parts[:3]
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for product '{name}'."
            )
        category = parts[3] if len(parts) == 4 else "electronics"
        specs.append(
            CartItemSpec(product_name=name, price=price, quantity=qty, category=category)
        )
    return specs


def _fill_cart(cart: ShoppingCart, specs: list[CartItemSpec]) -> None:
    for spec in specs:
        product = Product.create(
            name=spec.product_name,
            price=spec.price,
            category=Category.parse(spec.category),
            description=spec.description,
        )
        cart.add_item(product, spec.quantity)


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order {dto.id}")
    click.echo(f"Created:  {dto.created_at}")
    click.echo()
    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*47}")
    for item in dto.items:
        click.echo(
            f"  {item.product_name:<20} {item.quantity:>5} {item.unit_price:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*47}")
    click.echo(f"  {'Subtotal':<27} {dto.subtotal:>20}")
    if dto.discount_code:
        click.echo(f"  {'Discount (' + dto.discount_code + ')':<27} {'-' + dto.discount:>20}")
    click.echo(f"  {'Order Total':<27} {dto.total:>20}")
    click.echo()
    click.echo("Shipping to:")
    click.echo(dto.shipping_address)


@click.command("checkout")
@click.option(
    "--item",
    "items",
    multiple=True,
    required=True,
    help="Item as 'Name:Price:Qty[:Category]'. Repeat for more items.",
)
@click.option("--code", default=None, help="Discount code (e.g. SAVE10).")
@click.option("--street", required=True, help="Shipping street.")
@click.option("--city", required=True, help="Shipping city.")
@click.option("--zip", "zip_code", required=True, help="Shipping ZIP / postal code.")
@click.option("--country", required=True, help="Shipping country.")
def cart_checkout(
    items: tuple[str, ...],
    code: str | None,
    street: str,
    city: str,
    zip_code: str,
    country: str,
) -> None:
    """Fill a cart with the given items and check it out."""
    specs = _parse_items(items)
    cart = new_cart()

    try:
        _fill_cart(cart, specs)
        cart.apply_discount_code(code)
        address = Address(street=street, city=city, zip_code=zip_code, country=country)
        dto = checkout_handler().handle(cart, address)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("codes")
def discount_codes() -> None:
    """List the discount codes carts accept."""
    rates = discount_policy().rates
    if not rates:
        click.echo("No discount codes configured.")
        return

    click.echo(f"{'Code':<12} {'Discount':>8}")
    click.echo("-" * 21)
    for code, rate in rates.items():
        click.echo(f"{code:<12} {rate * 100:>7.0f}%")


def _add_headphones(cart: ShoppingCart, headphones: Product) -> None:
    # Receives the same cart object, not a copy.
    cart.add_item(headphones, 1)


@click.command("demo")
def cart_demo() -> None:
    """Walk through a scripted shopping session."""
    try:
        laptop = Product.create("MacBook Air", "1200", Category.ELECTRONICS, "Apple laptop")
        book = Product.create("Swift Programming", "45", Category.BOOKS, "Learn Swift language")
        headphones = Product.create("AirPods", "250", Category.ELECTRONICS, "Wireless earbuds")

        cart = new_cart()
        cart.add_item(laptop, 1)
        cart.add_item(book, 2)
        cart.add_item(laptop, 1)

        summary = ShowCartHandler().handle(cart)
        click.echo(f"Subtotal: {summary.subtotal}")
        click.echo(f"Item count: {summary.item_count}")

        cart.apply_discount_code("SAVE10")
        click.echo(f"Total with discount: {cart.total}")

        cart.remove_item(book.id)
        click.echo(f"After removing book, items left: {cart.item_count}")

        _add_headphones(cart, headphones)
        click.echo(f"After external modification, item count: {cart.item_count}")

        item1 = CartItem.of(laptop, 1)
        item2 = item1.copy()
        item2.set_quantity(5)
        click.echo(
            f"item1 quantity: {item1.quantity}, item2 quantity: {item2.quantity}"
        )

        address = Address(
            street="Main Street 10", city="Almaty", zip_code="050000", country="Kazakhstan"
        )
        order = checkout_handler().handle(cart, address)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order items count: {order.item_count}")
    click.echo(f"Cart items count: {cart.item_count}")
    click.echo()
    click.echo(f"Order created at {order.created_at}")
    click.echo("Shipping to:")
    click.echo(order.shipping_address)
