import pytest
from pydantic import ValidationError

from samples import (
    ADDRESS,
    BALANCE,
    CHECKPOINT_CONTENTS,
    CHECKPOINT_SUMMARY,
    COIN_METADATA,
    COIN_PAGE,
    COMMITTEE_INFO,
    EFFECTS,
    EVENT,
    GAS_ID,
    MOVE_FUNCTION,
    MOVE_MODULE,
    MOVE_STRUCT,
    OBJECT_ID,
    OBJECT_RESPONSE,
    PACKAGE_ID,
    PAST_OBJECT_RESPONSE,
    RECIPIENT,
    SYSTEM_STATE,
    TRANSACTION_BLOCK_RESPONSE,
    TRANSACTION_BYTES,
    TX_DIGEST,
)

from aiohttp_sui_rpc import models


@pytest.mark.parametrize('model,sample', [
    (models.SuiObjectResponse, OBJECT_RESPONSE),
    (models.PastObjectResponse, PAST_OBJECT_RESPONSE),
    (models.TransactionEffects, EFFECTS),
    (models.TransactionBlockResponse, TRANSACTION_BLOCK_RESPONSE),
    (models.TransactionBytes, TRANSACTION_BYTES),
    (models.SuiEvent, EVENT),
    (models.Balance, BALANCE),
    (models.PaginatedCoins, COIN_PAGE),
    (models.CoinMetadata, COIN_METADATA),
    (models.CheckpointContents, CHECKPOINT_CONTENTS),
    (models.CheckpointSummary, CHECKPOINT_SUMMARY),
    (models.MoveNormalizedFunction, MOVE_FUNCTION),
    (models.MoveNormalizedStruct, MOVE_STRUCT),
    (models.MoveNormalizedModule, MOVE_MODULE),
    (models.SuiSystemState, SYSTEM_STATE),
    (models.CommitteeInfoResponse, COMMITTEE_INFO),
])
def test_round_trip(model, sample):
    value = model.from_json(sample)

    assert model.from_json(value.to_json()) == value


def test_wire_names_and_big_integers():
    response = models.SuiObjectResponse.from_json(OBJECT_RESPONSE)

    assert response.data.object_id == OBJECT_ID
    assert response.data.version == 13488
    assert response.data.object_type == '0x2::coin::Coin<0x2::sui::SUI>'
    assert response.data.owner == {'AddressOwner': ADDRESS}

    data = response.to_json()['data']

    assert data['objectId'] == OBJECT_ID
    assert data['version'] == '13488'
    assert data['type'] == '0x2::coin::Coin<0x2::sui::SUI>'
    assert data['storageRebate'] == '988000'


def test_unknown_fields_are_kept():
    sample = dict(BALANCE, fundsInAddressBalance='7')
    balance = models.Balance.from_json(sample)

    assert balance.to_json()['fundsInAddressBalance'] == '7'


def test_models_are_immutable():
    balance = models.Balance.from_json(BALANCE)

    with pytest.raises(ValidationError):
        balance.total_balance = 0


def test_object_ref():
    response = models.SuiObjectResponse.from_json(OBJECT_RESPONSE)
    ref = response.data.object_ref()

    assert ref == models.SuiObjectRef(
        object_id=OBJECT_ID, version=13488, digest=response.data.digest)

    assert ref.to_json() == {
        'objectId': OBJECT_ID,
        'version': 13488,
        'digest': response.data.digest,
    }


def test_past_object():
    past_object = models.PastObjectResponse.from_json(PAST_OBJECT_RESPONSE)

    assert past_object.found
    assert past_object.object_data().object_id == OBJECT_ID

    deleted = models.PastObjectResponse.from_json({
        'status': 'ObjectDeleted',
        'details': {'objectId': OBJECT_ID, 'version': 3, 'digest': 'x'},
    })

    assert not deleted.found
    assert deleted.object_data() is None


def test_transaction_block_response():
    response = models.TransactionBlockResponse.from_json(
        TRANSACTION_BLOCK_RESPONSE)

    assert response.effects.status.success
    assert response.effects.gas_used.computation_cost == 750000
    assert response.effects.gas_object.reference.object_id == GAS_ID
    assert response.events[0].id.tx_digest == TX_DIGEST
    assert response.balance_changes[0].amount == -1747880
    assert response.checkpoint == 1024


def test_checkpoint_summary():
    summary = models.CheckpointSummary.from_json(CHECKPOINT_SUMMARY)
    gas_summary = summary.epoch_rolling_gas_cost_summary

    assert isinstance(gas_summary, models.GasCostSummary)
    assert gas_summary.storage_rebate == 0
    assert summary.sequence_number == 1024


def test_move_metadata():
    module = models.MoveNormalizedModule.from_json(MOVE_MODULE)

    assert module.friends == [models.MoveModuleId(address='0x2', name='sui')]
    assert module.structs['Coin'].abilities.abilities == ['Store', 'Key']
    assert module.structs['Coin'].type_parameters[0].is_phantom
    assert module.structs['Coin'].fields[1].name == 'balance'

    function = module.exposed_functions['join']

    assert function.is_entry
    assert function.return_ == []
    assert function.parameters[1] == 'Address'
    assert function.to_json()['return'] == []


def test_page():
    page = models.PaginatedCoins.from_json(COIN_PAGE)

    assert page.has_next_page
    assert page.next_cursor == OBJECT_ID
    assert page.data[0].balance == 100000000

    events = models.PaginatedEvents.from_json({
        'data': [EVENT],
        'nextCursor': EVENT['id'],
        'hasNextPage': False,
    })

    assert events.next_cursor == models.EventId(
        tx_digest=TX_DIGEST, event_seq=0)


def test_committee_info():
    committee = models.CommitteeInfoResponse.from_json(COMMITTEE_INFO)

    assert committee.epoch == 12
    assert committee.validators[0][1] == 2500
    assert committee.to_json()['validators'] == COMMITTEE_INFO['validators']


def test_options():
    assert models.ObjectDataOptions(show_type=True).to_json() == {
        'showType': True,
        'showOwner': False,
        'showPreviousTransaction': False,
        'showDisplay': False,
        'showContent': False,
        'showBcs': False,
        'showStorageRebate': False,
    }

    assert all(models.TransactionBlockResponseOptions.full()
               .to_json().values())


def test_batch_transaction_params():
    params = [
        models.RPCTransactionRequestParams.transfer_object(
            RECIPIENT, OBJECT_ID),
        models.RPCTransactionRequestParams.move_call(
            '0x2', 'devnet_nft', 'mint', arguments=['name', 'desc', 'url']),
    ]

    assert params[0].to_json() == {
        'transferObjectRequestParams': {
            'recipient': RECIPIENT,
            'objectId': OBJECT_ID,
        },
    }

    assert params[1].to_json() == {
        'moveCallRequestParams': {
            'packageObjectId': '0x2',
            'module': 'devnet_nft',
            'function': 'mint',
            'typeArguments': [],
            'arguments': ['name', 'desc', 'url'],
        },
    }


def test_event_filter():
    from aiohttp_sui_rpc.models import EventFilter

    event_filter = EventFilter.or_(
        EventFilter.move_module(PACKAGE_ID, 'pay'),
        EventFilter.all(
            EventFilter.sender(ADDRESS),
            EventFilter.time_range(1681318800000, 1681318900000),
        ),
    )

    data = {
        'Or': [
            {'MoveModule': {'package': PACKAGE_ID, 'module': 'pay'}},
            {'All': [
                {'Sender': ADDRESS},
                {'TimeRange': {
                    'startTime': '1681318800000',
                    'endTime': '1681318900000',
                }},
            ]},
        ],
    }

    assert event_filter.to_json() == data
    assert EventFilter.from_json(data) == event_filter

    with pytest.raises(ValueError):
        EventFilter.from_json({'Sender': ADDRESS, 'Package': PACKAGE_ID})
