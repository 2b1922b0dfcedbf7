#!/usr/bin/python
""" convert efi guids to names and symbols and back """
import sys
import logging
import argparse

from efiguid import names
from efiguid import symbols
from efiguid.known import well_known
from efiguid.table import GuidTable
from efiguid.errors import GuidError

def list_guids(table):
    for entry in table:
        print(f'{{{entry.name}}}\t{entry.guid}\t{entry.symbol}\t{entry.description}')

def make_resolver(options):
    resolvers = [ symbols.ProcessSymbolResolver(options.libraries or ()) ]
    for filename in options.pefiles or ():
        logging.info('reading exports from %s', filename)
        resolvers.append(symbols.PeSymbolResolver(filename))
    if len(resolvers) == 1:
        return resolvers[0]
    return symbols.ChainSymbolResolver(*resolvers)

##################################################################################################
# main

def main(argv = None):
    parser = argparse.ArgumentParser()
    parser.add_argument('-l', '--loglevel', dest = 'loglevel', type = str, default = 'info',
                        help = 'set loglevel to LEVEL', metavar = 'LEVEL')
    parser.add_argument('-L', '--list-guids', dest = 'list',
                        action = 'store_true', default = False,
                        help = 'list well-known guids')
    parser.add_argument('-n', '--name', dest = 'names', type = str, action = 'append',
                        help = 'print name of GUID', metavar = 'GUID')
    parser.add_argument('-s', '--symbol', dest = 'symbols', type = str, action = 'append',
                        help = 'print symbol of GUID', metavar = 'GUID')
    parser.add_argument('-g', '--guid', dest = 'guids', type = str, action = 'append',
                        help = 'print guid of NAME ({NAME} works too)', metavar = 'NAME')
    parser.add_argument('--guids', dest = 'guidfile', type = str,
                        help = 'load additional guids from FILE (efivar guids.txt format)',
                        metavar = 'FILE')
    parser.add_argument('--library', dest = 'libraries', type = str, action = 'append',
                        help = 'also resolve efi_guid_* symbols in shared library LIB',
                        metavar = 'LIB')
    parser.add_argument('--pe', dest = 'pefiles', type = str, action = 'append',
                        help = 'also resolve efi_guid_* symbols exported by pe binary FILE',
                        metavar = 'FILE')
    options = parser.parse_args(argv)

    logging.basicConfig(format = '%(levelname)s: %(message)s',
                        level = getattr(logging, options.loglevel.upper()))

    try:
        table = well_known
        if options.guidfile:
            table = table.merged(GuidTable.from_file(options.guidfile))
        resolver = make_resolver(options)

        if options.list:
            list_guids(table)
        for item in options.names or ():
            print(names.guid_to_name(names.str_to_guid(item), table = table))
        for item in options.symbols or ():
            print(names.guid_to_symbol(names.str_to_guid(item), table = table))
        for item in options.guids or ():
            print(names.name_to_guid(item, table = table, resolver = resolver))
    except (GuidError, OSError, ValueError) as err:
        logging.error('%s', err)
        return 1

    return 0

if __name__ == '__main__':
    sys.exit(main())
