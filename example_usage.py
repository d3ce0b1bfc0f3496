#!/usr/bin/env python3
"""
Basic usage examples for TC3 Python client library.

This script demonstrates how to sign requests and call an action with the
TC3 client library. Credentials are read from TENCENTCLOUD_SECRET_ID and
TENCENTCLOUD_SECRET_KEY.
"""

import datetime
import logging
import sys

from tc3_client import (
    Action,
    ClientConfig,
    ConfigurationError,
    TC3Client,
    TC3ClientError,
    TencentCloudSDKError,
    with_language
)
from tc3_client.signer import build_canonical_request, sign_request


DESCRIBE_REGIONS = Action("cvm", "DescribeRegions", "2017-03-12")


def demonstrate_signing():
    """Show the signing steps without sending anything."""
    print("1. Signing a request offline...")
    now = datetime.datetime(2024, 1, 1, tzinfo=datetime.timezone.utc)
    headers = {
        "Host": DESCRIBE_REGIONS.host(),
        "Content-Type": "application/json",
        "X-TC-Timestamp": str(int(now.timestamp())),
    }
    body = b"{}"

    canonical_hash, signed_headers, _ = build_canonical_request("POST", "/", "", headers, body)
    print(f"   Signed headers: {signed_headers}")
    print(f"   Canonical hash: {canonical_hash}")

    authorization = sign_request("AKIDEXAMPLE", "example-secret-key", "cvm", headers, body, now)
    print(f"   Authorization: {authorization}")
    print()


def main(config):
    """Call DescribeRegions with the configured credentials."""
    print("2. Calling cvm DescribeRegions...")
    print(f"   Secret id: {config.secret_id[:8]}...")
    print(f"   Region: {config.region}")

    with TC3Client(with_language(config, "en-US")) as client:
        try:
            document = client.send(DESCRIBE_REGIONS)
            regions = document["Response"].get("RegionSet", [])
            print(f"   ✓ {len(regions)} regions")
            for region in regions:
                print(f"   - {region['Region']}: {region.get('RegionName', '')}")
        except TencentCloudSDKError as e:
            print(f"   ✗ Service error {e.code}: {e.message}")
            print(f"   Request id: {e.request_id}")
        except TC3ClientError as e:
            print(f"   ✗ Call failed: {e}")
    print()


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)

    demonstrate_signing()

    try:
        config = ClientConfig.from_env()
    except ConfigurationError as e:
        print(f"Credentials not configured ({e}).")
        print("> export TENCENTCLOUD_SECRET_ID=... TENCENTCLOUD_SECRET_KEY=...")
        sys.exit(1)

    main(config)
