MAINNET = 'https://fullnode.mainnet.sui.io:443'
TESTNET = 'https://fullnode.testnet.sui.io:443'
DEVNET = 'https://fullnode.devnet.sui.io:443'
LOCALNET = 'http://127.0.0.1:9000'

NETWORKS = {
    'mainnet': MAINNET,
    'testnet': TESTNET,
    'devnet': DEVNET,
    'localnet': LOCALNET,
}


def network_url(name):
    try:
        return NETWORKS[name.lower()]

    except KeyError:
        raise ValueError('unknown network {!r}, expected one of {}'.format(
            name, ', '.join(sorted(NETWORKS)))) from None
