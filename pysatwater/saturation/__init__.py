from .saturation import (Pws_l, Pws_s, Pws, dPws_l, dPws_s, dPws, Tws, Tws_result, Tws_guess, TwsResult,
                         saturation_phase, in_range)
