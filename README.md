# analysistree

An in-memory event data model for heavy-ion physics analyses. It describes
what each branch of an event holds, stores the values of each object, and
keeps the matchings between objects of different branches. It has no
dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `analysistree.constants`: `DetType` (`HIT`, `MODULE`, `TRACK`,
  `EVENT_HEADER`, `PARTICLE`, `GENERIC`), `Types` (`FLOAT`, `INTEGER`, `BOOL`),
  the predefined field ids `TrackFields`, `ParticleFields`, `HitFields`,
  `ModuleFields`, `EventHeaderFields` (all negative), the undefined-value
  constants such as `UNDEF_VALUE_FLOAT` and `UNDEF_VALUE_INT` (both -999), and
  `field_type_of(value)`, which maps a Python `bool`, `int` or `float` to its
  `Types` member.
- `analysistree.branch_config`: `BranchConfig` and `ConfigElement`.
- `analysistree.configuration`: `Configuration` and `MatchingConfig`.
- `analysistree.matching`: `Matching`.
- `analysistree.container`: `Container`.
- `analysistree.event_header`, `hit`, `module`, `track`, `particle`:
  `EventHeader`, `Hit`, `Module` and `ModulePosition`, `Track`, `Particle`.
- `analysistree.detector`: `Detector`.
- `analysistree.data_header`: `DataHeader`.
- `analysistree.pdg`: `mass_by_pdg(pdg)` and `charge_by_pdg(pdg)`.

## Concepts

### Branch configurations

`BranchConfig(name, det_type, title="")` describes one branch. Its `id` is a
64-bit value derived from the name (`branch_id_for(name)`), so equal names
give equal ids. Depending on `det_type` the branch starts with predefined
fields carrying negative ids, e.g. `pT` with `TrackFields.PT` for tracks.

User fields are added with `add_field(name, field_type, title, field_id=None)`
or `add_fields(names, field_type, title)`. The field type may be a `Types`
member or one of `float`, `int`, `bool`. Without an explicit id a field gets
the next free slot, counted from zero separately for each type. Adding a name
that already exists raises `ValueError`.

`field_id(name)` and `field_type(name)` return `None` for an unknown name;
`has_field`, `fields`, `field_names` and `size` inspect the configuration.
`remove_field` raises `KeyError` for an unknown name and `ValueError` for a
predefined field; the ids above the removed one move down by one.
`clone(name, det_type)` copies the user fields, and `clone_and_merge(other)`
adds the other branch's fields prefixed with its name, plus a
`matching_case` integer field unless either branch is an event header.
`describe()` returns a printable table of the fields.

### Configuration

`Configuration(name)` holds branch configurations keyed by id and the
matchings between them. `branch_config(key)` accepts a name or an id and
raises `KeyError` if there is no such branch. `add_match` accepts either a
`Matching` (the data branch is then named `"<first>2<second>"`) or a
`MatchingConfig`; adding a match between a pair that is already matched
issues a `RuntimeWarning` and changes nothing.

`match_name(br1, br2)` looks up the pair in that order only, while
`match_info(br1, br2)` also tries the swapped order and returns
`(data_branch, swapped)`; both raise `KeyError` when nothing is found.
`remove_branch_config(name)` drops the branch and every matching that
involves it. `merge(other)` adds the branches of another configuration,
raising `ValueError` on a clash of ids or names.

### Containers and physics objects

`Container(id, branch=None)` keeps one list of values per field type, sized
from a branch with `init(branch)`. `set_field(value, field_id, field_type=None)`
picks the type from the value when none is given; `get_field(field_id,
field_type=Types.FLOAT)` reads it back. Ids out of range raise `IndexError`.

`EventHeader`, `Hit`, `Module`, `Track` and `Particle` extend `Container`.
Their `get_field` and `set_field` also accept the negative predefined ids of
their kind. Setting a derived quantity (such as `pT` or `phi`) or the id is
ignored; an unknown negative id raises an error.

- `Track` has `px`, `py`, `pz`, `charge`, and the derived `pt`, `phi`, `p`,
  `eta`; `rapidity(pdg)` and `rapidity_by_mass(mass)` compute the rapidity.
- `Particle` adds `pid`, `mass`, `energy` and `kinetic_energy`.
  `set_pid(pid)` fills mass and charge from the PDG code if they are still
  unset. `set_mass` and `set_charge` raise `RuntimeError` unless
  `allow_explicit_mass_and_charge()` was called first.
- `Hit` has `x`, `y`, `z`, `signal` and `phi`; `Module` has `number` and
  `signal`; `ModulePosition` has a position and `phi`.
- `EventHeader` has a vertex position and behaves as a detector with one
  channel: `len()` is 1, iterating yields the header itself, and
  `clear_channels` / `add_channel` raise `TypeError`.

### Detectors

`Detector(channel_type, id=0)` is an ordered list of channels. `add_channel`
creates a channel whose id is its position, optionally sized from a branch.
`channel(n)` and indexing raise `IndexError` for a wrong number.

### Matchings and the data header

`Matching(branch1_id, branch2_id)` maps channel ids both ways;
`get_match(id, inverted=False)` returns `UNDEF_VALUE_INT` when there is no
match, and an id keeps its first match.

`DataHeader` stores the collision system, the time-slice length, detector
positions and module positions (`add_detector`). `set_beam_momentum(momentum,
m_target=0.938, m_beam=0.938)` derives `sqrt_snn` and `beam_rapidity`.

### PDG codes

`mass_by_pdg` and `charge_by_pdg` use a small built-in table of common
leptons, mesons and baryons and their antiparticles. Ion codes of the form
`100ZZZAAAI` get A times 0.938 GeV and charge Z. Other codes raise
`ValueError`.

## Example

```python
from analysistree.branch_config import BranchConfig
from analysistree.configuration import Configuration
from analysistree.constants import DetType, Types
from analysistree.detector import Detector
from analysistree.matching import Matching
from analysistree.particle import Particle
from analysistree.track import Track

config = Configuration("example")

rec = BranchConfig("RecTracks", DetType.TRACK)
rec.add_field("dca_x", Types.FLOAT, "cm")
rec.add_field("nhits", Types.INTEGER, "number of hits")
sim = BranchConfig("SimParticles", DetType.PARTICLE)

config.add_branch_config(rec)
config.add_branch_config(sim)

tracks = Detector(Track, rec.id)
track = tracks.add_channel(rec)
track.set_momentum(0.5, 0.2, 2.0)
track.set_field(1.5, rec.field_id("dca_x"), Types.FLOAT)
track.set_field(12, rec.field_id("nhits"), Types.INTEGER)

particles = Detector(Particle, sim.id)
particle = particles.add_channel(sim)
particle.set_momentum(0.5, 0.2, 2.0)
particle.set_pid(211)

matching = Matching(rec.id, sim.id)
matching.add_match(track.id, particle.id)
config.add_match(matching)

print(config.match_name("RecTracks", "SimParticles"))  # RecTracks2SimParticles
print(track.rapidity(211))
print(config.describe())
```

## What this package does not do

It is a data model kept in memory only. It does not read or write data
files or trees, has no event loop or task framework for processing data
sets, and installs no command-line tool. The PDG lookup covers only the
species in its built-in table.