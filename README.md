# gen3trade

Helpers for third-generation Pokémon party data and the random-number
generators the games use. Pure Python, no dependencies.

## Modules

- `gen3trade.lcg` – the handheld and console linear congruential generators,
  stepping forwards and backwards (`next_seed`, `prev_seed`, `next_seed_colo`,
  `prev_seed_colo`), `nature_of`, and seed recovery from two 16-bit outputs
  (`seeds_gba3`, `reverse_masked_ivs_seeds_gba3`, `seeds_colo`,
  `seeds_ivs_colo`). It also checks trainer IDs (`are_colo_valid_tid_sid`)
  and finds the IVs generated with a PID (`search_specific_low_pid`,
  `search_specific_low_pid_colo`, `roamer_ivs`); these return `None` when no
  seed fits.
- `gen3trade.generators` – builds PID/IV combinations for shiny eggs
  (`generate_egg_shiny_info`), non-shiny static encounters
  (`generate_static_info`), Colosseum and XD shadow Pokémon
  (`generate_shadow_info_colo`, `generate_shadow_info_xd`) and roamers moved
  to the console (`convert_roamer_to_colo_info`). Results are `GeneratedMon`
  values (`pid`, `ivs`, `ability`), or `None` when nothing fits.
  `determine_lower_pid_gendered` adjusts a PID half for a wanted gender.
- `gen3trade.shiny_generators` – the shiny counterparts
  (`generate_static_shiny_info`, `generate_shadow_shiny_info_colo`,
  `convert_shiny_roamer_to_colo_info`), also returning `GeneratedMon` or
  `None`, and `shiny_pid_candidates`, which yields every shiny PID of a
  nature for a trainer.
- `gen3trade.mon_data` – the 48-byte data section of a stored Pokémon:
  `block_orders`, `index_key`, `compute_checksum`, and `decrypt_blocks` /
  `encrypt_blocks`, which work with `DecryptedBlocks` (`growth`, `attacks`,
  `evs`, `misc`). A bad checksum raises `ChecksumError`.
- `gen3trade.stats` – IVs (`iv_of`), EVs (`ev_of`, `legal_evs`), Hidden Power
  (`hidden_power_type`, `hidden_power_power`), `is_shiny`,
  `ability_num_gen_4_5`, `is_ability_valid`, `gender_from_kind` and
  `trainer_gender` (returning `Gender`), `met_level`, and Pokérus handling
  (`pokerus_status` returning `Pokerus`, `sanitize_pokerus`, `update_pokerus`,
  `would_update_end_pokerus`).
- `gen3trade.moves` – `is_move_valid`, `pp_of_move` and a `Moveset` with PP
  Up bonuses that can `teach`, `swap`, `make_legal`, `learn_if_possible`
  (returning a `LearnResult`) and `forget_and_learn`.
- `gen3trade.options` – `build_main_options` (returning `MainOptions`),
  `count_higher_options`, `count_lower_options` and `trade_options` for the
  generation choices and the tradeable party slots.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from gen3trade.lcg import next_seed, prev_seed, seeds_gba3

seed = 0x12345678
assert prev_seed(next_seed(seed)) == seed

first = next_seed(seed) >> 16
second = next_seed(next_seed(seed)) >> 16
assert seed in seeds_gba3(first, second)
```

The generators take an explicit `start_seed`, so the same input always gives
the same result:

```python
from gen3trade.generators import generate_static_info

mon = generate_static_info(wanted_nature=3, wanted_ivs=0x1234, tsv=0x4321, start_seed=7)
if mon is not None:
    print(hex(mon.pid), hex(mon.ivs))
```

## What it does not do

- It has no species, move, item or name tables. Callers pass in what those
  would give: packed abilities to `is_ability_valid`, a gender kind to
  `gender_from_kind`, base PP through `Moveset.base_pp`.
- It does not read or write save files, and has no link-cable trading, menus
  or screens. `gen3trade.options` only computes the choices a menu would show.
- There is no command-line program.