"""
Diagnose Storefront API access
Usage: python scripts/diagnose_storefront.py [search text]
"""
import asyncio
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv

env_path = Path(__file__).parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)
    print(f"📄 Loaded .env from {env_path}\n")

from core.commerce import StorefrontClient, StorefrontError


async def diagnose(search_text: str):
    """Check config, run one search and create one cart"""
    client = StorefrontClient()

    print("🔍 Storefront diagnostics...\n")

    print("1️⃣ Configuration...")
    if not client.store_domain or not client.access_token:
        print("   ❌ SHOPIFY_STORE_DOMAIN / SHOPIFY_STOREFRONT_TOKEN not set")
        return 1
    print(f"   ✅ Endpoint: {client.endpoint}")

    try:
        print(f"\n2️⃣ Search '{search_text}'...")
        try:
            products = await client.search_products(search_text)
            print(f"   ✅ {len(products)} products")
            for product in products[:3]:
                print(f"      - {product.title} ({product.price}) {product.url}")
        except StorefrontError as e:
            print(f"   ❌ {e.kind}: {e}")
            return 1

        print("\n3️⃣ Cart creation...")
        try:
            cart = await client.create_cart()
            print(f"   ✅ Cart: {cart.id}")
            print(f"   Checkout: {cart.checkout_url}")
        except StorefrontError as e:
            print(f"   ❌ {e.kind}: {e}")
            return 1
    finally:
        await client.aclose()

    print("\n✅ Storefront API reachable")
    return 0


if __name__ == "__main__":
    text = " ".join(sys.argv[1:])
    sys.exit(asyncio.run(diagnose(text)))
