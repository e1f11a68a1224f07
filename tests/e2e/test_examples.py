"""End-to-end tests running the example script and mixed-type pipelines."""

import runpy
from pathlib import Path

import numpy as np

import arithmos as ar

EXAMPLES = Path(__file__).resolve().parents[2] / "examples"


class TestExamples:
    """The shipped examples run to completion."""

    def test_basic_usage(self, capsys):
        runpy.run_path(str(EXAMPLES / "basic_usage.py"), run_name="__main__")
        out = capsys.readouterr().out
        assert "gcd(48u32, 18u32) = 6" in out
        assert "lcm(4u32, 6u32) = 12" in out
        assert "pow(2i32, 10) = np.int32(1024)" in out or "pow(2i32, 10) = 1024" in out
        assert "is not representable in int8" in out


class TestPipelines:
    """Generic code written once, run over every concrete type."""

    def test_every_concrete_type_satisfies_the_identity_laws(self):
        for tp in ar.concrete_types():
            x = tp(6)
            assert x + ar.zero(tp) == x
            assert x * ar.one(tp) == x
            assert ar.pow(x, 2) == 36

    def test_euclidean_types_share_one_gcd_routine(self):
        for tp in ar.concrete_types():
            if not ar.implements(tp, ar.Euclidean):
                continue
            assert ar.gcd(tp(48), tp(18)) == 6
            assert ar.lcm(tp(4), tp(6)) == 12

    def test_signed_types_share_one_signum(self):
        for tp in ar.concrete_types():
            if not ar.implements(tp, ar.Signed):
                continue
            assert ar.sign_number(tp(-3)) == -1
            assert ar.of_sign(tp, ar.sign(tp(0))) == 0
            assert ar.is_positive(ar.absolute(tp(-3)))

    def test_reduce_gcd_over_array(self):
        values = np.array([84, 126, 210, 462], dtype=np.int64)
        g = values[0]
        for v in values[1:]:
            g = ar.gcd(g, v)
        assert g == 42
        assert isinstance(g, np.int64)
