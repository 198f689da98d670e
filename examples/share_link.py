import argparse
from urllib.parse import parse_qs, urlencode, urlsplit

import jsonblob

BASE_URL = 'https://example.com/view'


def main():
    parser = argparse.ArgumentParser('share-link')
    parser.add_argument('url', nargs='?', help='a share link to unpack')
    args = parser.parse_args()

    if args.url:
        blob = parse_qs(urlsplit(args.url).query)['s'][0]
        print(f'{jsonblob.decode(blob)=}')
        return

    settings = {'theme': 'dark', 'panels': ['editor', 'preview'], 'zoom': 1.25}
    print(f'{BASE_URL}?{urlencode({"s": jsonblob.encode(settings)})}')


if __name__ == '__main__':
    try:
        main()
    except KeyboardInterrupt:
        pass
