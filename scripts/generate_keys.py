#!/usr/bin/env python3
"""
Генерирует пару PGP-ключей и печатает строки для .env.
Запуск: python scripts/generate_keys.py --name "Ops" --email ops@example.com > .env
"""

import argparse
import base64

from securegen.crypto import generate_keypair


def to_env_lines(public_armored: str, private_armored: str) -> str:
    public_b64 = base64.b64encode(public_armored.encode("utf-8")).decode("ascii")
    private_b64 = base64.b64encode(private_armored.encode("utf-8")).decode("ascii")
    return f"PGP_PUBLIC_KEY_BASE64={public_b64}\nPGP_PRIVATE_KEY_BASE64={private_b64}"


def main():
    parser = argparse.ArgumentParser(description="Generate a PGP key pair for securegen")
    parser.add_argument("--name", default="securegen", help="User ID name")
    parser.add_argument("--email", default="", help="User ID email")
    parser.add_argument("--key-size", type=int, default=3072)
    parser.add_argument("--passphrase", help="Protect the private key")
    args = parser.parse_args()

    public_armored, private_armored = generate_keypair(
        args.name, email=args.email, key_size=args.key_size, passphrase=args.passphrase
    )
    print(to_env_lines(public_armored, private_armored))
    if args.passphrase:
        print(f"PGP_PRIVATE_KEY_PASSPHRASE={args.passphrase}")


if __name__ == "__main__":
    main()
