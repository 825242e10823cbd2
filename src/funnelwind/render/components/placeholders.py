"""
Placeholders for platform-managed checkout elements.

Each renders a dashed, labelled box; the page builder swaps it for the real
element on import.
"""

from __future__ import annotations

from dataclasses import dataclass

from funnelwind.markup import Child, TagInstance
from funnelwind.render.context import RenderContext
from funnelwind.render.styles import ResolvedNode, ResolvedStyle, node


@dataclass(frozen=True)
class PlaceholderTheme:
    gradient_from: str
    gradient_to: str
    border: str
    badge_bg: str
    badge_color: str
    icon_color: str
    title_color: str
    text_color: str


class PlaceholderRenderer:
    tag = ""
    data_type = ""
    css_class = ""
    element_label = ""
    title = ""
    icon = ""
    description = ""
    default_min_height = "400px"
    theme: PlaceholderTheme

    def render(self, instance: TagInstance, ctx: RenderContext, content: list[Child]) -> ResolvedNode:
        theme = self.theme
        style = ResolvedStyle()
        style.update(
            {
                "display": "flex",
                "flex-direction": "column",
                "align-items": "center",
                "justify-content": "center",
                "width": instance.attr("width", "100%"),
                "min-height": instance.attr("min-height", self.default_min_height),
                "background": f"linear-gradient(135deg, {theme.gradient_from} 0%, {theme.gradient_to} 100%)",
                "border": f"3px dashed {theme.border}",
                "border-radius": "16px",
                "padding": "32px",
                "box-sizing": "border-box",
                "text-align": "center",
                "gap": "16px",
                "margin-top": instance.attr("mt"),
            }
        )
        style.classes.extend(["cf-placeholder", self.css_class])
        style.set_data("type", self.data_type)

        badge = node(
            "div",
            {
                "display": "inline-flex",
                "align-items": "center",
                "gap": "6px",
                "background-color": theme.badge_bg,
                "color": theme.badge_color,
                "padding": "6px 12px",
                "border-radius": "9999px",
                "font-size": "12px",
                "font-weight": "600",
            },
            [node("i", classes="fas fa-info-circle"), node("span", children=[self.element_label])],
        )
        icon = node("i", {"font-size": "48px", "color": theme.icon_color}, classes=self.icon)
        title = node(
            "h3",
            {"font-size": "20px", "font-weight": "700", "color": theme.title_color, "margin": "0"},
            [self.title],
        )
        text = node(
            "p",
            {
                "font-size": "14px",
                "color": theme.text_color,
                "margin": "0",
                "max-width": "400px",
                "line-height": "1.5",
            },
            [self.description],
        )
        return ResolvedNode(tag="div", style=style, children=[badge, icon, title, text])


class CheckoutPlaceholderRenderer(PlaceholderRenderer):
    tag = "cf-checkout-placeholder"
    data_type = "CheckoutPlaceholder"
    css_class = "cf-checkout-placeholder"
    element_label = "Checkout/V2"
    title = "Checkout Form"
    icon = "fas fa-credit-card"
    description = (
        "This placeholder outputs a Checkout/V2 element. The checkout form collects "
        "payment information and processes orders in your funnel."
    )
    default_min_height = "400px"
    theme = PlaceholderTheme("#fef3c7", "#fde68a", "#f59e0b", "#fbbf24", "#78350f", "#d97706", "#92400e", "#b45309")


class OrderSummaryPlaceholderRenderer(PlaceholderRenderer):
    tag = "cf-order-summary-placeholder"
    data_type = "OrderSummaryPlaceholder"
    css_class = "cf-order-summary-placeholder"
    element_label = "CheckoutOrderSummary/V1"
    title = "Order Summary"
    icon = "fas fa-list-alt"
    description = (
        "This placeholder outputs a CheckoutOrderSummary/V1 element. It displays "
        "the cart items, prices, and totals linked to your checkout form."
    )
    default_min_height = "200px"
    theme = PlaceholderTheme("#e0e7ff", "#c7d2fe", "#6366f1", "#818cf8", "#1e1b4b", "#4f46e5", "#3730a3", "#4338ca")


class ConfirmationPlaceholderRenderer(PlaceholderRenderer):
    tag = "cf-confirmation-placeholder"
    data_type = "ConfirmationPlaceholder"
    css_class = "cf-confirmation-placeholder"
    element_label = "OrderConfirmation/V1"
    title = "Order Confirmation"
    icon = "fas fa-receipt"
    description = (
        "This placeholder outputs an OrderConfirmation/V1 element. It shows "
        "purchase details and receipt information on thank you pages."
    )
    default_min_height = "300px"
    theme = PlaceholderTheme("#d1fae5", "#a7f3d0", "#10b981", "#34d399", "#064e3b", "#059669", "#065f46", "#047857")
