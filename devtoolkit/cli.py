#!/usr/bin/env python3
import argparse
import json
import logging
import sys

from pydantic import ValidationError

from . import codec, formatter, identifiers, timeconv, tokens
from .config import Settings
from .digest import Algorithm, digest, digest_all
from .errors import ToolkitError
from .log import setup_logging

logger = logging.getLogger(__name__)


# ---------- I/O collaborators ----------
def read_input(args) -> str:
    if getattr(args, 'input', None) is not None:
        return args.input
    if getattr(args, 'file', None):
        with open(args.file, 'r', encoding='utf-8') as f:
            return f.read()
    return sys.stdin.read()

def emit(args, text: str):
    if getattr(args, 'output', None):
        with open(args.output, 'w', encoding='utf-8') as f:
            f.write(text)
        logger.info("wrote %d characters to %s", len(text), args.output)
    else:
        print(text)

def show_timestamp(args, value: timeconv.TimestampValue):
    emit(args, '\n'.join([
        f"Unix (s):  {value.epoch_seconds}",
        f"Unix (ms): {value.epoch_millis}",
        f"ISO 8601:  {value.iso_string}",
        f"Human:     {value.human_string}",
    ]))


# ---------- CLI commands ----------
def cmd_base64(args):
    src = read_input(args)
    if args.action == 'encode':
        data = codec.from_hex(src) if args.hex else codec.to_bytes(src)
        emit(args, codec.base64url_encode(data) if args.url else codec.base64_encode(data))
    else:
        data = codec.base64url_decode(src) if args.url else codec.base64_decode(src)
        emit(args, codec.to_hex(data) if args.hex else data.decode('utf-8', errors='replace'))

def cmd_url(args):
    src = read_input(args)
    if args.action == 'encode':
        emit(args, codec.percent_encode(src))
    else:
        emit(args, codec.percent_decode(src))

def cmd_hash(args):
    src = read_input(args)
    data = codec.from_hex(src) if args.hex else codec.to_bytes(src)
    if args.algo == 'all':
        emit(args, '\n'.join(f"{algo.name}: {d.hex}" for algo, d in digest_all(data).items()))
    else:
        emit(args, digest(data, Algorithm(args.algo)).hex)

def cmd_uuid(args):
    if args.sub == 'v4':
        values = identifiers.generate_batch(args.count)
    else:
        name = args.name or args.settings.default_v5_name
        values = [identifiers.generate_v5(args.namespace, name)]
    emit(args, '\n'.join(str(u) for u in values))

def cmd_jwt(args):
    token = tokens.decode(read_input(args))
    lines = [
        "Header:",
        json.dumps(token.header, indent=2, ensure_ascii=False),
        "Payload:",
        json.dumps(token.payload, indent=2, ensure_ascii=False),
    ]
    exp = tokens.expires_at(token)
    if exp is not None:
        lines.append(f"Expires: {timeconv.human(exp, args.tz or args.settings.timezone)}")
    emit(args, '\n'.join(lines))
    if tokens.is_expired(token):
        print("Token is expired!", file=sys.stderr)

def cmd_time(args):
    tz = args.tz or args.settings.timezone
    if args.sub == 'now':
        show_timestamp(args, timeconv.now(tz))
    elif args.sub == 'unix':
        show_timestamp(args, timeconv.from_unix(read_input(args), tz))
    else:
        show_timestamp(args, timeconv.from_iso(read_input(args), tz))

def cmd_json(args):
    src = read_input(args)
    indent = args.indent if args.indent is not None else args.settings.json_indent
    if args.action == 'format' and args.format == 'yaml':
        emit(args, formatter.format_yaml(src))
    elif args.action == 'format':
        emit(args, formatter.format_json(src, indent))
    elif args.action == 'minify':
        emit(args, formatter.minify_json(src))
    elif args.action == 'validate':
        formatter.validate(src, args.format)
        emit(args, f"Valid {args.format.upper()}")
    elif args.action == 'to-yaml':
        emit(args, formatter.json_to_yaml(src))
    else:
        emit(args, formatter.yaml_to_json(src, indent))


# ---------- Argument parser ----------
def add_io(p, positional=True):
    if positional:
        p.add_argument('input', nargs='?', help="Input text (default: --file or stdin)")
        p.add_argument('--file', help="Read input from a UTF-8 file")
    p.add_argument('--output', help="Write result to a UTF-8 file")

def build_parser():
    p = argparse.ArgumentParser(prog='devtoolkit', description="Developer data-transformation toolkit")
    p.add_argument('-v', '--verbose', action='store_true', help="Debug logging")
    sub = p.add_subparsers(dest='cmd', required=True)

    # base64
    b = sub.add_parser('base64', help="Base64 / Base64-URL encoder/decoder")
    b.add_argument('action', choices=['encode', 'decode'])
    add_io(b)
    b.add_argument('--url', action='store_true', help="URL-safe alphabet, no padding")
    b.add_argument('--hex', action='store_true', help="Hex input (encode) or hex output (decode)")
    b.set_defaults(func=cmd_base64)

    # url
    u = sub.add_parser('url', help="Percent-encoding (RFC 3986)")
    u.add_argument('action', choices=['encode', 'decode'])
    add_io(u)
    u.set_defaults(func=cmd_url)

    # hash
    h = sub.add_parser('hash', help="Hash generator")
    h.add_argument('algo', choices=[a.value for a in Algorithm] + ['all'])
    add_io(h)
    h.add_argument('--hex', action='store_true', help="Interpret input as hex")
    h.set_defaults(func=cmd_hash)

    # uuid
    uu = sub.add_parser('uuid', help="UUID generator")
    uus = uu.add_subparsers(dest='sub', required=True)
    u4 = uus.add_parser('v4', help="Random UUIDs")
    u4.add_argument('--count', type=int, default=1, help="Number of UUIDs (1-100)")
    add_io(u4, positional=False)
    u4.set_defaults(func=cmd_uuid)
    u5 = uus.add_parser('v5', help="Name-based UUID (SHA-1)")
    u5.add_argument('name', nargs='?')
    u5.add_argument('--namespace', default='dns', help="dns, url, oid, x500 or a UUID")
    add_io(u5, positional=False)
    u5.set_defaults(func=cmd_uuid)

    # jwt
    j = sub.add_parser('jwt', help="Decode a JWT (no signature verification)")
    add_io(j)
    j.add_argument('--tz', help="Timezone for the expiry date")
    j.set_defaults(func=cmd_jwt)

    # time
    ti = sub.add_parser('time', help="Unix timestamp / ISO 8601 / human-readable")
    tis = ti.add_subparsers(dest='sub', required=True)
    t1 = tis.add_parser('unix', help="Seconds or milliseconds since epoch")
    add_io(t1)
    t2 = tis.add_parser('iso', help="ISO 8601 date/time")
    add_io(t2)
    t3 = tis.add_parser('now', help="Current time")
    add_io(t3, positional=False)
    for t in (t1, t2, t3):
        t.add_argument('--tz', help="UTC, local or an IANA zone name")
        t.set_defaults(func=cmd_time)

    # json
    js = sub.add_parser('json', help="JSON formatter and JSON/YAML converter")
    js.add_argument('action', choices=['format', 'minify', 'validate', 'to-yaml', 'to-json'])
    add_io(js)
    js.add_argument('--format', default='json', choices=list(formatter.FORMATS), help="Input format for format and validate")
    js.add_argument('--indent', type=int)
    js.set_defaults(func=cmd_json)

    return p

def main(argv=None):
    try:
        settings = Settings()
    except ValidationError as e:
        print(f"Error: invalid DEVTOOLKIT_* settings: {e}", file=sys.stderr)
        return 2
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging('DEBUG' if args.verbose else settings.log_level)
    args.settings = settings
    try:
        args.func(args)
    except ToolkitError as e:
        logger.debug("%s failed: %s", args.cmd, type(e).__name__)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
