import argparse
import sys

from .errors import ValidationError
from .keys import PrivateKey, PublicKey
from .signature import Signature


def keygen(args):
    private_key = PrivateKey()
    print("Private key:", private_key.to_hex())
    print("WIF:", private_key.to_wif(compressed=args.compressed, testnet=args.testnet))
    print("Public key:", private_key.public_key.hex(compressed=args.compressed))
    return 0


def pubkey(args):
    private_key = PrivateKey.from_hex(args.private_key)
    print(private_key.public_key.hex(compressed=args.compressed))
    return 0


def sign(args):
    private_key = PrivateKey.from_hex(args.private_key)
    print(private_key.sign(args.message).hex())
    return 0


def verify(args):
    public_key = PublicKey.from_hex(args.public_key)
    signature = Signature.from_hex(args.signature)
    if public_key.verify(args.message, signature):
        print("valid")
        return 0
    print("invalid")
    return 1


def main(argv=None):
    parser = argparse.ArgumentParser(prog="ecsig")
    subparsers = parser.add_subparsers()

    parser_keygen = subparsers.add_parser('keygen', help='Generate a key pair.')
    parser_keygen.add_argument('--compressed', action='store_true', help='Use the compressed public key form.')
    parser_keygen.add_argument('--testnet', action='store_true', help='Encode the WIF for testnet.')
    parser_keygen.set_defaults(func=keygen)

    parser_pubkey = subparsers.add_parser('pubkey', help='Derive the public key of a private key.')
    parser_pubkey.add_argument('--private-key', type=str, required=True, help='Private key as 64 hex digits.')
    parser_pubkey.add_argument('--compressed', action='store_true', help='Use the compressed public key form.')
    parser_pubkey.set_defaults(func=pubkey)

    parser_sign = subparsers.add_parser('sign', help='Sign a message.')
    parser_sign.add_argument('--private-key', type=str, required=True, help='Private key as 64 hex digits.')
    parser_sign.add_argument('--message', type=str, required=True, help='Message to sign.')
    parser_sign.set_defaults(func=sign)

    parser_verify = subparsers.add_parser('verify', help='Verify a message')
    parser_verify.add_argument('--public-key', type=str, required=True, help='Public key for verification.')
    parser_verify.add_argument('--message', type=str, required=True, help='Message to verify.')
    parser_verify.add_argument('--signature', type=str, required=True, help='Signature as 128 hex digits.')
    parser_verify.set_defaults(func=verify)

    args = parser.parse_args(argv)
    if not hasattr(args, 'func'):
        parser.print_help()
        return 2
    try:
        return args.func(args)
    except ValidationError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
