import argparse
import sys

import msgspec

from jsonblob import codec, errors, logs, utils

log = logs.get('jsonblob')


def parse_args(argv=None):
    parser = argparse.ArgumentParser('jsonblob')
    parser.add_argument(
        '-v',
        '--verbose',
        action='count',
        default=0,
        help='increase log verbosity (can be repeated)',
    )
    subparsers = parser.add_subparsers(dest='action', required=True)

    encode_parser = subparsers.add_parser('encode', help='encode JSON text to a transport string')
    encode_parser.add_argument(
        '-i',
        '--input-path',
        help='a file containing JSON text. reads STDIN by default',
    )

    decode_parser = subparsers.add_parser('decode', help='decode a transport string to JSON text')
    decode_parser.add_argument(
        'blob',
        nargs='?',
        help='the transport string. reads STDIN by default',
    )
    decode_parser.add_argument(
        '--indent',
        type=int,
        default=0,
        help='pretty print the output with this many spaces',
    )

    return parser.parse_args(argv)


def run_encode(args):
    if args.input_path:
        with open(args.input_path, 'rb') as f:
            text = f.read()
    else:
        text = sys.stdin.buffer.read()

    try:
        value = msgspec.json.decode(text)
    except msgspec.DecodeError as exc:
        raise errors.MalformedJson(f'invalid input: {exc}') from exc
    return codec.encode(value)


def run_decode(args):
    blob = args.blob if args.blob is not None else sys.stdin.buffer.read()
    data = msgspec.json.encode(codec.decode(blob))
    if args.indent:
        data = msgspec.json.format(data, indent=args.indent)
    return data.decode('utf8')


def main(argv=None):
    args = parse_args(argv)
    logs.init(args.verbose)

    action = run_encode if args.action == 'encode' else run_decode
    try:
        print(action(args))
    except (errors.JsonBlobError, OSError) as exc:
        log.debug('%s failed', args.action, exc_info=True)
        print(f'error: {utils.format.format_exc(exc)}', file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        pass
