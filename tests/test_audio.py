from fireduck.audio import (
    AudioInstance,
    Category,
    PlaybackMode,
    PlaybackSettings,
    apply_global_volume,
    music,
    sound_effect,
)


def test_music_loops():
    instance = music("song")
    assert instance.handle == "song"
    assert instance.settings.mode is PlaybackMode.LOOP
    assert instance.category is Category.MUSIC


def test_sound_effect_despawns():
    instance = sound_effect("step")
    assert instance.settings.mode is PlaybackMode.DESPAWN
    assert instance.category is Category.SOUND_EFFECT


def test_apply_global_volume_multiplies():
    loud = AudioInstance("a", PlaybackSettings(volume=2.0), Category.MUSIC)
    plain = sound_effect("b")
    apply_global_volume(0.5, [loud, plain])
    assert loud.sink_volume == 0.5 * 2.0
    assert plain.sink_volume == 0.5