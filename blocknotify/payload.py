import json

BLOCKNOTIFY_TEMPLATE = '{{"command":"blocknotify","params":["{coin}","{block}"]}}\n'


def blocknotify_payload(coin, blockhash, escape=False):
    # Values go in as-is unless asked otherwise; the daemon supplies them
    if escape:
        coin = json.dumps(coin)[1:-1]
        blockhash = json.dumps(blockhash)[1:-1]
    return BLOCKNOTIFY_TEMPLATE.format(coin=coin, block=blockhash)


def command_payload(command, params, options):
    message = {'command': command, 'params': params, 'options': options}
    return json.dumps(message, separators=(',', ':')) + '\n'
