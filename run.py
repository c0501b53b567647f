from campfire_survival.main import main

if __name__ == "__main__":
    main()
