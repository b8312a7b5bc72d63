"""
Quick API smoke script against a running service
"""

import httpx
import asyncio


async def smoke_api():
    """Exercise the verification endpoints"""

    base_url = "http://localhost:8001"

    print("Testing NewsVerify API...")
    print("=" * 50)

    async with httpx.AsyncClient(timeout=30.0) as client:
        print("\n1. Health check...")
        response = await client.get(f"{base_url}/health")
        print(f"Status: {response.status_code}")
        print(f"Response: {response.json()}")

        print("\n2. Verify text...")
        response = await client.post(
            f"{base_url}/verify",
            json={
                "contentType": "text",
                "content": "BREAKING!! You won't believe this SHOCKING viral story!!!"
            }
        )
        print(f"Status: {response.status_code}")
        print(f"Response: {response.json()}")

        print("\n3. Verify image...")
        response = await client.post(
            f"{base_url}/verify",
            json={
                "contentType": "image",
                "content": "data:image/png;base64,iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNkYPhfDwAChwGA60e6kgAAAABJRU5ErkJggg=="
            }
        )
        print(f"Status: {response.status_code}")
        print(f"Response: {response.json()}")

        print("\n4. Metrics...")
        response = await client.get(f"{base_url}/metrics")
        print(f"Status: {response.status_code}")
        print(f"Response: {response.json()}")

    print("\n" + "=" * 50)
    print("Smoke test completed")


if __name__ == "__main__":
    asyncio.run(smoke_api())
