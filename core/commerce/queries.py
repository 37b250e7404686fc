"""GraphQL documents sent to the Shopify Storefront API."""

# Products per search page
SEARCH_PAGE_SIZE = 10

_PRODUCT_FIELDS = """
    id
    title
    handle
    description
    featuredImage { url }
    images(first: 1) { edges { node { url } } }
    priceRange { minVariantPrice { amount currencyCode } }
    variants(first: 5) {
      edges { node { id title price { amount currencyCode } } }
    }
"""

SEARCH_PRODUCTS = """
query SearchProducts($query: String!, $first: Int!) {
  products(first: $first, query: $query) {
    edges { node { %s } }
  }
}
""" % _PRODUCT_FIELDS

PRODUCT_BY_HANDLE = """
query ProductByHandle($handle: String!) {
  product(handle: $handle) { %s }
}
""" % _PRODUCT_FIELDS

CART_CREATE = """
mutation CartCreate {
  cartCreate {
    cart { id checkoutUrl totalQuantity }
    userErrors { field message }
  }
}
"""

CART_LINES_ADD = """
mutation CartLinesAdd($cartId: ID!, $lines: [CartLineInput!]!) {
  cartLinesAdd(cartId: $cartId, lines: $lines) {
    cart { id checkoutUrl totalQuantity }
    userErrors { field message }
  }
}
"""
