#!/usr/bin/env python3

import subprocess
import sys

CONTAINER_NAME = 'catdex-db'
PASSWORD = 'mypassword'
HOST_PORT = 5433
CONTAINER_PORT = 5432
IMAGE = 'postgres:12.3-alpine'


def run_cmd(*cmd):
    print(' '.join(cmd))
    subprocess.run(cmd, check=True)


def main():
    # No --rm: the container outlives this script, so a second run
    # fails on the name instead of silently replacing the database.
    try:
        run_cmd('docker', 'run',
                '--name', CONTAINER_NAME,
                '-e', 'POSTGRES_PASSWORD={}'.format(PASSWORD),
                '-p', '{}:{}'.format(HOST_PORT, CONTAINER_PORT),
                '-d', IMAGE)
    except subprocess.CalledProcessError as err:
        sys.exit(err.returncode)
    except FileNotFoundError:
        print('docker: command not found', file=sys.stderr)
        sys.exit(127)


if __name__ == '__main__':
    main()
