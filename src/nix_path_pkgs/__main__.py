from nix_path_pkgs.cli import main


main()
